"""
Optimistic create/update/delete against a remote collection.

Every call applies its expected effect to the shared store first and returns an
``asyncio.Task`` that resolves once the remote call settles: the store is then
reconciled with the server record (confirmed) or restored (rolled back).

Mutations on the same key run one after another. A call for a key that is
still pending waits for every earlier mutation of that key and its optimistic
effect is only applied once they have all finished, so a late rollback can
never clobber a newer value. Cancelling a queued call does not let the ones
behind it jump ahead. Different keys run concurrently.
"""
from __future__ import annotations

import asyncio
import itertools
import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel

from console.client.remote import RemoteCollectionClient
from console.core.audit import AuditTrail, log_event
from console.core.errors import ReconciliationFailure
from console.schemas.common import EntityId
from console.state.store import EntityStore

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)
D = TypeVar("D", bound=BaseModel)

PLACEHOLDER_PREFIX = "tmp-"


class MutationState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    CONFIRMED = "confirmed"
    ROLLED_BACK = "rolled_back"


class _Mutation:
    """One optimistic step: apply locally, call remote, confirm or roll back."""

    operation = ""

    def __init__(self, key: Any):
        self.key = key

    def apply(self, store: EntityStore) -> None:
        raise NotImplementedError

    def remote(self) -> Awaitable[Any]:
        raise NotImplementedError

    def confirm(self, store: EntityStore, result: Any) -> Any:
        raise NotImplementedError

    def rollback(self, store: EntityStore) -> None:
        raise NotImplementedError


class _Create(_Mutation):
    operation = "create"

    def __init__(self, key: str, placeholder: BaseModel, call: Callable[[], Awaitable[Any]]):
        super().__init__(key)
        self.placeholder = placeholder
        self.call = call

    def apply(self, store):
        store.upsert(self.placeholder)

    def remote(self):
        return self.call()

    def confirm(self, store, result):
        # matched by the correlation token, the id changes here
        store.replace(self.key, result)
        return result

    def rollback(self, store):
        store.remove(self.key)


class _Update(_Mutation):
    operation = "update"

    def __init__(self, key, model: type[BaseModel], changes: Mapping[str, Any], call):
        super().__init__(key)
        self.model = model
        self.changes = dict(changes)
        self.call = call
        self.prior: Optional[BaseModel] = None
        self.optimistic: Optional[BaseModel] = None

    def apply(self, store):
        prior = store.get(self.key)
        if prior is not None:
            optimistic = self.model.model_validate({**prior.model_dump(), **self.changes})
            self.prior, self.optimistic = prior, optimistic
            store.upsert(optimistic)

    def remote(self):
        return self.call()

    def confirm(self, store, result):
        if result != store.get(self.key):
            store.upsert(result)
        return result

    def rollback(self, store):
        if self.prior is not None:
            store.upsert(self.prior)


class _Delete(_Mutation):
    operation = "delete"

    def __init__(self, key, call):
        super().__init__(key)
        self.call = call
        self.prior: Optional[BaseModel] = None
        self.position: Optional[int] = None

    def apply(self, store):
        self.position = store.index_of(self.key)
        if self.position is not None:
            self.prior = store.get(self.key)
            store.remove(self.key)

    def remote(self):
        return self.call()

    def confirm(self, store, result):
        return None

    def rollback(self, store):
        if self.prior is not None:
            store.upsert(self.prior, index=self.position)


class SyncCoordinator(Generic[T, D]):
    """Turns create/update/delete requests into optimistic, reconciled mutations.

    All coordinators of one entity type must share the same store.
    Calls must be made from inside a running event loop.
    """

    def __init__(
        self,
        store: EntityStore[T],
        client: RemoteCollectionClient[T, D],
        model: type[T],
        entity: Optional[str] = None,
        audit: Optional[AuditTrail] = None,
    ):
        self.store = store
        self.client = client
        self.model = model
        self.entity = entity or store.name
        self.audit = audit
        self._tokens = itertools.count(1)
        self._inflight: dict[Any, list[asyncio.Task]] = {}

    # --- public API --------------------------------------------------------

    def create(self, draft: D) -> "asyncio.Task[T]":
        token = f"{PLACEHOLDER_PREFIX}{next(self._tokens)}"
        placeholder = self.model.model_validate({**draft.model_dump(), "id": token})
        return self._submit(_Create(token, placeholder, lambda: self.client.create(draft)))

    def update(self, entity_id: EntityId, changes: Mapping[str, Any]) -> "asyncio.Task[T]":
        changes = dict(changes)
        changes.pop("id", None)
        current = self.store.get(entity_id)
        if current is not None:
            # bad changes fail here, even when the update has to queue
            self.model.model_validate({**current.model_dump(), **changes})
        return self._submit(
            _Update(entity_id, self.model, changes, lambda: self.client.update(entity_id, changes))
        )

    def delete(self, entity_id: EntityId) -> "asyncio.Task[None]":
        return self._submit(_Delete(entity_id, lambda: self.client.delete(entity_id)))

    def state(self, key: Any) -> MutationState:
        return MutationState.PENDING if key in self._inflight else MutationState.IDLE

    def pending(self) -> set:
        return set(self._inflight)

    async def drain(self) -> None:
        """Wait until every in-flight mutation has reached a terminal state."""
        while self._inflight:
            await asyncio.wait([task for chain in self._inflight.values() for task in chain])

    # --- internals ---------------------------------------------------------

    def _submit(self, mutation: _Mutation) -> asyncio.Task:
        loop = asyncio.get_running_loop()
        earlier = list(self._inflight.get(mutation.key, ()))

        if not earlier:
            # idle key: the optimistic effect lands before the caller resumes
            mutation.apply(self.store)
            task = loop.create_task(self._reconcile(mutation))
        else:
            logger.debug("%s %s of %r queued behind pending mutation",
                         self.entity, mutation.operation, mutation.key)
            task = loop.create_task(self._after(earlier, mutation))

        self._inflight.setdefault(mutation.key, []).append(task)
        task.add_done_callback(lambda t, key=mutation.key: self._release(key, t))
        return task

    async def _after(self, earlier: list[asyncio.Task], mutation: _Mutation) -> Any:
        action = f"{self.entity}.{mutation.operation}"
        try:
            await asyncio.wait(earlier)
        except asyncio.CancelledError:
            log_event(self.audit, action, MutationState.ROLLED_BACK.value,
                      entity=self.entity, entity_id=mutation.key, meta={"reason": "cancelled"})
            raise
        try:
            mutation.apply(self.store)
        except Exception as exc:
            log_event(self.audit, action, MutationState.ROLLED_BACK.value,
                      entity=self.entity, entity_id=mutation.key, meta={"reason": str(exc)})
            raise ReconciliationFailure(mutation.operation, mutation.key, str(exc)) from exc
        return await self._reconcile(mutation)

    async def _reconcile(self, mutation: _Mutation) -> Any:
        action = f"{self.entity}.{mutation.operation}"
        try:
            result = await mutation.remote()
        except asyncio.CancelledError:
            mutation.rollback(self.store)
            log_event(self.audit, action, MutationState.ROLLED_BACK.value,
                      entity=self.entity, entity_id=mutation.key, meta={"reason": "cancelled"})
            raise
        except Exception as exc:
            mutation.rollback(self.store)
            log_event(self.audit, action, MutationState.ROLLED_BACK.value,
                      entity=self.entity, entity_id=mutation.key, meta={"reason": str(exc)})
            raise ReconciliationFailure(mutation.operation, mutation.key, str(exc)) from exc

        outcome = mutation.confirm(self.store, result)
        meta = None
        if isinstance(mutation, _Create):
            meta = {"server_id": result.id}
        log_event(self.audit, action, MutationState.CONFIRMED.value,
                  entity=self.entity, entity_id=mutation.key, meta=meta)
        return outcome

    def _release(self, key: Any, task: asyncio.Task) -> None:
        chain = self._inflight.get(key)
        if chain is None or task not in chain:
            return
        chain.remove(task)
        if not chain:
            del self._inflight[key]
