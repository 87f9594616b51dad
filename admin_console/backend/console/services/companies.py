import asyncio
import logging
from typing import Any, Mapping, Optional

from console.client.remote import RemoteCollectionClient
from console.schemas.common import EntityId
from console.schemas.company import Company, CompanyDraft
from console.state.store import EntityStore
from console.state.sync import SyncCoordinator

logger = logging.getLogger(__name__)


class CompanyService:
    def __init__(
        self,
        store: EntityStore[Company],
        client: RemoteCollectionClient[Company, CompanyDraft],
        coordinator: SyncCoordinator[Company, CompanyDraft],
        primary_id: EntityId = 1,
    ):
        if coordinator.store is not store:
            raise ValueError("coordinator must share the company store")
        self.store = store
        self.client = client
        self.coordinator = coordinator
        self.primary_id = primary_id

    async def load(self) -> tuple:
        companies = await self.client.list()
        self.store.replace_all(companies)
        return self.store.snapshot()

    async def load_primary(self) -> Company:
        """Fetch the main company and keep it in the store. Failures propagate."""
        company = await self.client.get(self.primary_id)
        self.store.upsert(company)
        logger.info("Primary company loaded: %s", company.name)
        return company

    def primary(self) -> Optional[Company]:
        return self.store.get(self.primary_id)

    async def get(self, company_id: EntityId) -> Company:
        return await self.client.get(company_id)

    def create(self, draft: CompanyDraft) -> "asyncio.Task[Company]":
        return self.coordinator.create(draft)

    def update(self, company_id: EntityId, changes: Mapping[str, Any]) -> "asyncio.Task[Company]":
        return self.coordinator.update(company_id, changes)

    def delete(self, company_id: EntityId) -> "asyncio.Task[None]":
        return self.coordinator.delete(company_id)
