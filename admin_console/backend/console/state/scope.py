from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable

from console.state.store import EntityStore, Observer, Subscription

logger = logging.getLogger(__name__)


class ViewScope:
    """Subscriptions and response guard for one caller-side view.

    Responses resolved through :meth:`resolve` and callbacks scheduled through
    :meth:`defer` are dropped once the scope is invalidated or closed. This only
    protects the view: the store-level outcome of a mutation is always applied.
    """

    def __init__(self, name: str = "view"):
        self.name = name
        self._generation = 0
        self._subscriptions: list[Subscription] = []
        self._timers: list[asyncio.TimerHandle] = []
        self.closed = False

    def watch(self, store: EntityStore, observer: Observer) -> Subscription:
        sub = store.subscribe(observer)
        self._subscriptions.append(sub)
        return sub

    def token(self) -> int:
        return self._generation

    def is_current(self, token: int) -> bool:
        return not self.closed and token == self._generation

    def invalidate(self) -> None:
        self._generation += 1

    async def resolve(self, awaitable: Awaitable[Any], apply: Callable[[Any], None]) -> bool:
        """Await a response and hand it to ``apply`` if the scope is still current."""
        token = self._generation
        result = await awaitable
        if not self.is_current(token):
            logger.debug("Discarding stale response for %s (generation %d)", self.name, token)
            return False
        apply(result)
        return True

    def defer(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        token = self._generation

        def run() -> None:
            if self.is_current(token):
                callback()

        handle = asyncio.get_running_loop().call_later(delay, run)
        self._timers.append(handle)
        return handle

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.invalidate()
        for sub in self._subscriptions:
            sub.cancel()
        self._subscriptions.clear()
        for handle in self._timers:
            handle.cancel()
        self._timers.clear()

    def __enter__(self) -> "ViewScope":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    async def __aenter__(self) -> "ViewScope":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.close()