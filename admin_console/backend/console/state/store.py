"""
In-memory snapshot of one entity collection with replay-of-latest broadcast.

Nothing in here awaits, so under the asyncio loop every mutation is applied
and announced as one indivisible step.
"""
from __future__ import annotations

import logging
from collections import deque
from typing import Any, Callable, Generic, Iterable, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
Snapshot = tuple
Observer = Callable[[Sequence[T]], None]


class Subscription(Generic[T]):
    """Handle returned by :meth:`EntityStore.subscribe`.

    Usable as a context manager so the observer is released on every exit path.
    Cancelling only stops delivery, it never touches in-flight mutations.
    """

    def __init__(self, store: "EntityStore[T]", observer: Observer):
        self._store = store
        self._observer = observer
        self._last_version = -1
        self.active = True

    def _deliver(self, version: int, snapshot: Sequence[T]) -> None:
        if not self.active or version <= self._last_version:
            return
        self._last_version = version
        try:
            self._observer(snapshot)
        except Exception as exc:
            logger.error("Observer of %s store failed: %s", self._store.name, exc)

    def cancel(self) -> None:
        if self.active:
            self.active = False
            self._store._detach(self)

    def __enter__(self) -> "Subscription[T]":
        return self

    def __exit__(self, *exc_info) -> None:
        self.cancel()


class EntityStore(Generic[T]):
    """Authoritative local view of one remote collection.

    Entities are matched by their ``id`` attribute. Only the coordinator (and
    full reloads) should call the mutating methods.
    """

    def __init__(self, name: str, entities: Iterable[T] = ()):
        self.name = name
        self._items: list[T] = []
        self._subscriptions: list[Subscription[T]] = []
        self._version = 0
        self._outbox: deque[tuple[int, Snapshot]] = deque()
        self._delivering = False
        self._load(entities)

    # --- reads -------------------------------------------------------------

    def snapshot(self) -> Snapshot:
        return tuple(self._items)

    def get(self, entity_id: Any) -> Optional[T]:
        index = self.index_of(entity_id)
        return None if index is None else self._items[index]

    def index_of(self, entity_id: Any) -> Optional[int]:
        for i, item in enumerate(self._items):
            if item.id == entity_id:
                return i
        return None

    def __len__(self) -> int:
        return len(self._items)

    # --- subscriptions -----------------------------------------------------

    def subscribe(self, observer: Observer) -> Subscription[T]:
        sub = Subscription(self, observer)
        self._subscriptions.append(sub)
        sub._deliver(self._version, self.snapshot())
        return sub

    def _detach(self, sub: Subscription[T]) -> None:
        try:
            self._subscriptions.remove(sub)
        except ValueError:
            pass

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    # --- mutations ---------------------------------------------------------

    def replace_all(self, entities: Iterable[T]) -> None:
        self._load(entities)
        self._notify()

    def upsert(self, entity: T, index: Optional[int] = None) -> None:
        """Replace the entity with the same id in place, or insert it.

        ``index`` positions a new entity (clamped to the collection bounds);
        without it new entities are appended.
        """
        current = self.index_of(entity.id)
        if current is not None:
            self._items[current] = entity
        elif index is None:
            self._items.append(entity)
        else:
            self._items.insert(max(0, min(index, len(self._items))), entity)
        self._notify()

    def replace(self, old_id: Any, entity: T) -> None:
        """Swap the entity stored under ``old_id`` for ``entity`` at the same position."""
        current = self.index_of(old_id)
        if current is None:
            self.upsert(entity)
            return
        duplicate = self.index_of(entity.id) if entity.id != old_id else None
        self._items[current] = entity
        if duplicate is not None:
            del self._items[duplicate]
        self._notify()

    def remove(self, entity_id: Any) -> None:
        """Drop ``entity_id`` from the store.

        Removing an id that is not there changes nothing, so observers are not
        notified.
        """
        current = self.index_of(entity_id)
        if current is None:
            return
        del self._items[current]
        self._notify()

    # --- internals ---------------------------------------------------------

    def _load(self, entities: Iterable[T]) -> None:
        items: list[T] = []
        positions: dict[Any, int] = {}
        for entity in entities:
            # later duplicates win, ids stay unique
            if entity.id in positions:
                items[positions[entity.id]] = entity
            else:
                positions[entity.id] = len(items)
                items.append(entity)
        self._items = items

    def _notify(self) -> None:
        self._version += 1
        self._outbox.append((self._version, self.snapshot()))
        if self._delivering:
            # an observer mutated the store; the outer loop delivers in order
            return

        self._delivering = True
        try:
            while self._outbox:
                version, snapshot = self._outbox.popleft()
                for sub in list(self._subscriptions):
                    sub._deliver(version, snapshot)
        finally:
            self._delivering = False
