import asyncio
from typing import Any, Mapping, Optional

from console.client.remote import RemoteCollectionClient
from console.geo import coordinates
from console.geo.coordinates import CountryCoordinate
from console.schemas.common import EntityId
from console.schemas.location import Location, LocationDraft, LocationKind
from console.state.store import EntityStore
from console.state.sync import SyncCoordinator


class LocationService:
    def __init__(
        self,
        store: EntityStore[Location],
        client: RemoteCollectionClient[Location, LocationDraft],
        coordinator: SyncCoordinator[Location, LocationDraft],
    ):
        if coordinator.store is not store:
            raise ValueError("coordinator must share the location store")
        self.store = store
        self.client = client
        self.coordinator = coordinator

    async def load(self) -> tuple:
        self.store.replace_all(await self.client.list())
        return self.store.snapshot()

    def current(self) -> tuple:
        return self.store.snapshot()

    def by_country(self, country: str) -> list[Location]:
        return [loc for loc in self.store.snapshot() if loc.country == country]

    def by_kind(self, kind: LocationKind) -> list[Location]:
        return [loc for loc in self.store.snapshot() if loc.kind == kind]

    def active(self) -> list[Location]:
        return [loc for loc in self.store.snapshot() if loc.active]

    def coordinates(self, place: str) -> Optional[CountryCoordinate]:
        return coordinates.lookup(place)

    def places(self) -> list[str]:
        return coordinates.places()

    def create(self, draft: LocationDraft) -> "asyncio.Task[Location]":
        return self.coordinator.create(draft)

    def update(self, location_id: EntityId, changes: Mapping[str, Any]) -> "asyncio.Task[Location]":
        return self.coordinator.update(location_id, changes)

    def delete(self, location_id: EntityId) -> "asyncio.Task[None]":
        return self.coordinator.delete(location_id)
