"""
HTTP client for one remote collection (``/employees``, ``/companies``, ...).

Read-all calls are lenient: any failure is logged and an empty list comes back.
By-id reads and every mutating call raise :class:`TransportFailure`.
"""
from __future__ import annotations

import logging
from typing import Any, Generic, Mapping, Optional, Protocol, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from console.core.errors import TransportFailure
from console.schemas.common import EntityId, to_wire

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)
D = TypeVar("D", bound=BaseModel)

Filters = Union[BaseModel, Mapping[str, Any], None]


class RemoteCollectionClient(Protocol[T, D]):
    async def list(self, filters: Filters = None) -> list[T]: ...

    async def get(self, entity_id: EntityId) -> T: ...

    async def create(self, draft: D) -> T: ...

    async def update(self, entity_id: EntityId, changes: Mapping[str, Any]) -> T: ...

    async def delete(self, entity_id: EntityId) -> None: ...


def _detail(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return response.text or None
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return str(body)


class RemoteCollection(Generic[T, D]):
    def __init__(self, http: httpx.AsyncClient, resource: str, model: type[T]):
        self.http = http
        self.resource = resource.strip("/")
        self.model = model

    def _path(self, entity_id: Optional[EntityId] = None) -> str:
        if entity_id is None:
            return f"/{self.resource}"
        return f"/{self.resource}/{entity_id}"

    def _query(self, filters: Filters) -> dict[str, Any]:
        if filters is None:
            return {}
        if isinstance(filters, BaseModel):
            return filters.model_dump(mode="json", by_alias=True, exclude_none=True)
        return {k: v for k, v in to_wire(self.model, filters).items() if v is not None}

    async def _send(self, operation: str, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = await self.http.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportFailure(
                operation,
                self.resource,
                status_code=exc.response.status_code,
                detail=_detail(exc.response),
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportFailure(operation, self.resource, detail=str(exc)) from exc
        return response

    def _parse(self, operation: str, response: httpx.Response) -> T:
        try:
            return self.model.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise TransportFailure(
                operation,
                self.resource,
                status_code=response.status_code,
                detail=f"unreadable response: {exc}",
            ) from exc

    async def list(self, filters: Filters = None) -> list[T]:
        try:
            response = await self._send("list", "GET", self._path(), params=self._query(filters))
            items = [self.model.model_validate(row) for row in response.json()]
        except (TransportFailure, ValueError, ValidationError) as exc:
            logger.error("Error loading %s: %s", self.resource, exc)
            return []
        logger.debug("Loaded %d %s", len(items), self.resource)
        return items

    async def get(self, entity_id: EntityId) -> T:
        response = await self._send("get", "GET", self._path(entity_id))
        return self._parse("get", response)

    async def create(self, draft: D) -> T:
        response = await self._send(
            "create",
            "POST",
            self._path(),
            json=draft.model_dump(mode="json", by_alias=True),
        )
        return self._parse("create", response)

    async def update(self, entity_id: EntityId, changes: Mapping[str, Any]) -> T:
        response = await self._send(
            "update",
            "PATCH",
            self._path(entity_id),
            json=to_wire(self.model, changes),
        )
        return self._parse("update", response)

    async def delete(self, entity_id: EntityId) -> None:
        await self._send("delete", "DELETE", self._path(entity_id))
