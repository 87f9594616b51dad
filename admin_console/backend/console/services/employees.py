import asyncio
import logging
from typing import Any, Mapping, Optional

from console.client.remote import RemoteCollectionClient
from console.schemas.common import EntityId
from console.schemas.employee import Employee, EmployeeDraft, EmployeeFilters, EmployeeStatus
from console.state.store import EntityStore
from console.state.sync import SyncCoordinator
from console.stats.aggregation import (
    Summary,
    average_salary_by_department,
    filter_employees,
    summarize,
)

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(
        self,
        store: EntityStore[Employee],
        client: RemoteCollectionClient[Employee, EmployeeDraft],
        coordinator: SyncCoordinator[Employee, EmployeeDraft],
    ):
        if coordinator.store is not store:
            raise ValueError("coordinator must share the employee store")
        self.store = store
        self.client = client
        self.coordinator = coordinator

    async def load(self) -> tuple:
        """Reload the whole collection. A failed read leaves an empty list."""
        employees = await self.client.list()
        self.store.replace_all(employees)
        logger.info("Employees loaded: %d", len(employees))
        return self.store.snapshot()

    def current(self) -> tuple:
        return self.store.snapshot()

    async def get(self, employee_id: EntityId) -> Employee:
        return await self.client.get(employee_id)

    async def by_department(self, department: str) -> list[Employee]:
        return await self.client.list(EmployeeFilters(department=department))

    async def by_company(self, company_id: EntityId) -> list[Employee]:
        return await self.client.list(EmployeeFilters(company_id=company_id))

    async def by_status(self, status: EmployeeStatus) -> list[Employee]:
        return await self.client.list(EmployeeFilters(status=status))

    def create(self, draft: EmployeeDraft) -> "asyncio.Task[Employee]":
        return self.coordinator.create(draft)

    def update(self, employee_id: EntityId, changes: Mapping[str, Any]) -> "asyncio.Task[Employee]":
        return self.coordinator.update(employee_id, changes)

    def delete(self, employee_id: EntityId) -> "asyncio.Task[None]":
        return self.coordinator.delete(employee_id)

    def statistics(self, filters: Optional[EmployeeFilters] = None, decimals: int = 0) -> Summary:
        """Summary over the current snapshot, optionally narrowed by ``filters``."""
        summary = summarize(filter_employees(self.store.snapshot(), filters), decimals=decimals)
        logger.debug("Statistics computed: %s", summary)
        return summary

    def salary_by_department(self) -> dict[str, float]:
        return average_salary_by_department(self.store.snapshot())
