from datetime import date
from enum import Enum
from typing import Optional

from pydantic import Field

from console.schemas.common import EntityId, Patch, Record


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ON_LEAVE = "on-leave"


class EmployeeDraft(Record):
    name: str
    surname: str
    email: str
    phone: str = ""
    department: str
    role: str = ""
    salary: float = Field(gt=0)
    hire_date: date
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    # soft reference, the company may not be loaded (or exist) locally
    company_id: EntityId


class Employee(EmployeeDraft):
    id: EntityId


class EmployeePatch(Patch):
    name: Optional[str] = None
    surname: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    department: Optional[str] = None
    role: Optional[str] = None
    salary: Optional[float] = Field(default=None, gt=0)
    hire_date: Optional[date] = None
    status: Optional[EmployeeStatus] = None
    company_id: Optional[EntityId] = None


class EmployeeFilters(Record):
    """Equality filters; unset fields do not constrain."""

    department: Optional[str] = None
    status: Optional[EmployeeStatus] = None
    company_id: Optional[EntityId] = None

    def is_empty(self) -> bool:
        return self.department is None and self.status is None and self.company_id is None

    def matches(self, employee: Employee) -> bool:
        if self.department is not None and employee.department != self.department:
            return False
        if self.status is not None and employee.status != self.status:
            return False
        if self.company_id is not None and str(employee.company_id) != str(self.company_id):
            return False
        return True
