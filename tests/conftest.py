"""Shared fixtures.

The database URL is pointed at a throw-away sqlite file before anything from
``console`` is imported, so the API tests never touch a developer database.
"""

import asyncio
import itertools
import os
import tempfile
from datetime import date

import pytest

_TMP_DIR = tempfile.mkdtemp(prefix="console-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_TMP_DIR, 'console_test.db')}"
os.environ["SEED_DEMO_DATA"] = "1"

from console.core.audit import AuditTrail  # noqa: E402
from console.core.errors import TransportFailure  # noqa: E402
from console.schemas.employee import Employee, EmployeeDraft  # noqa: E402
from console.state.store import EntityStore  # noqa: E402
from console.state.sync import SyncCoordinator  # noqa: E402


def make_employee(emp_id=1, salary=1000.0, department="A", status="active", **extra) -> Employee:
    fields = dict(
        id=emp_id,
        name=f"Name{emp_id}",
        surname=f"Surname{emp_id}",
        email=f"user{emp_id}@example.com",
        phone="555-0100",
        department=department,
        role="Engineer",
        salary=salary,
        hire_date=date(2020, 1, 1),
        status=status,
        company_id=1,
    )
    fields.update(extra)
    return Employee(**fields)


def make_draft(salary=1500.0, department="A", **extra) -> EmployeeDraft:
    fields = dict(
        name="New",
        surname="Hire",
        email="new.hire@example.com",
        department=department,
        role="Analyst",
        salary=salary,
        hire_date=date(2024, 3, 1),
        company_id=1,
    )
    fields.update(extra)
    return EmployeeDraft(**fields)


class FakeRemote:
    """In-process remote collection.

    With ``hold=True`` every call parks on a future until the test releases it,
    which lets tests interleave mutations deterministically.
    """

    def __init__(self, model=Employee, rows=(), hold=False, id_factory=None):
        self.model = model
        self.rows = {row.id: row for row in rows}
        self.hold = hold
        self.calls: list[tuple] = []
        self.gates: list[asyncio.Future] = []
        counter = itertools.count(100)
        self._next_id = id_factory or (lambda: next(counter))

    async def _gate(self, *call):
        self.calls.append(call)
        if self.hold:
            gate = asyncio.get_running_loop().create_future()
            self.gates.append(gate)
            await gate

    async def settle(self, rounds: int = 5):
        for _ in range(rounds):
            await asyncio.sleep(0)

    def release(self, index: int = 0, error: Exception = None):
        gate = [g for g in self.gates if not g.done()][index]
        if error is None:
            gate.set_result(None)
        else:
            gate.set_exception(error)

    @property
    def waiting(self) -> int:
        return len([g for g in self.gates if not g.done()])

    async def list(self, filters=None):
        await self._gate("list", filters)
        return list(self.rows.values())

    async def get(self, entity_id):
        await self._gate("get", entity_id)
        if entity_id not in self.rows:
            raise TransportFailure("get", "employees", status_code=404)
        return self.rows[entity_id]

    async def create(self, draft):
        await self._gate("create", draft)
        record = self.model.model_validate({**draft.model_dump(), "id": self._next_id()})
        self.rows[record.id] = record
        return record

    async def update(self, entity_id, changes):
        await self._gate("update", entity_id, dict(changes))
        if entity_id not in self.rows:
            raise TransportFailure("update", "employees", status_code=404)
        record = self.model.model_validate({**self.rows[entity_id].model_dump(), **changes})
        self.rows[entity_id] = record
        return record

    async def delete(self, entity_id):
        await self._gate("delete", entity_id)
        if entity_id not in self.rows:
            raise TransportFailure("delete", "employees", status_code=404)
        del self.rows[entity_id]


@pytest.fixture
def employees():
    return [
        make_employee(1, 1000, "A"),
        make_employee(2, 2000, "A"),
        make_employee(3, 3000, "B"),
    ]


@pytest.fixture
def store(employees):
    return EntityStore("employees", employees)


@pytest.fixture
def remote(employees):
    return FakeRemote(Employee, employees)


@pytest.fixture
def audit():
    return AuditTrail()


@pytest.fixture
def coordinator(store, remote, audit):
    return SyncCoordinator(store, remote, Employee, "employee", audit)
