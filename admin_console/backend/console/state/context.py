from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx

from console.client.remote import RemoteCollection
from console.core.audit import AuditTrail
from console.core.config import Settings, settings as default_settings
from console.schemas.company import Company
from console.schemas.employee import Employee
from console.schemas.location import Location
from console.services.companies import CompanyService
from console.services.employees import EmployeeService
from console.services.locations import LocationService
from console.state.store import EntityStore
from console.state.sync import SyncCoordinator

logger = logging.getLogger(__name__)


class ConsoleContext:
    """Everything the console shares: one store per entity type and its services.

    Build it once at start-up and pass it to whatever needs a store. A second
    store for the same entity type would give two diverging views.
    """

    def __init__(self, http: httpx.AsyncClient, config: Optional[Settings] = None):
        config = config or default_settings
        self.http = http
        self.audit = AuditTrail()

        self.employee_store: EntityStore[Employee] = EntityStore("employees")
        self.company_store: EntityStore[Company] = EntityStore("companies")
        self.location_store: EntityStore[Location] = EntityStore("locations")

        self.employees = self._employee_service()
        self.companies = self._company_service(config.PRIMARY_COMPANY_ID)
        self.locations = self._location_service()

    def _employee_service(self) -> EmployeeService:
        client = RemoteCollection(self.http, "employees", Employee)
        coordinator = SyncCoordinator(self.employee_store, client, Employee, "employee", self.audit)
        return EmployeeService(self.employee_store, client, coordinator)

    def _company_service(self, primary_id) -> CompanyService:
        client = RemoteCollection(self.http, "companies", Company)
        coordinator = SyncCoordinator(self.company_store, client, Company, "company", self.audit)
        return CompanyService(self.company_store, client, coordinator, primary_id=primary_id)

    def _location_service(self) -> LocationService:
        client = RemoteCollection(self.http, "locations", Location)
        coordinator = SyncCoordinator(self.location_store, client, Location, "location", self.audit)
        return LocationService(self.location_store, client, coordinator)

    async def load_all(self) -> None:
        await self.employees.load()
        await self.companies.load()
        await self.locations.load()

    async def drain(self) -> None:
        """Wait for every pending mutation of every entity type."""
        for service in (self.employees, self.companies, self.locations):
            await service.coordinator.drain()

    @classmethod
    @asynccontextmanager
    async def open(
        cls,
        config: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> AsyncIterator["ConsoleContext"]:
        config = config or default_settings
        async with httpx.AsyncClient(
            base_url=config.API_BASE_URL,
            timeout=config.REQUEST_TIMEOUT,
            transport=transport,
        ) as http:
            ctx = cls(http, config)
            logger.info("Console context opened against %s", config.API_BASE_URL)
            try:
                yield ctx
            finally:
                await ctx.drain()
