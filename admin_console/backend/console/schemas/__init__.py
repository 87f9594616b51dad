from console.schemas.common import EntityId, Record, to_wire
from console.schemas.company import Company, CompanyDraft, CompanyPatch
from console.schemas.employee import (
    Employee,
    EmployeeDraft,
    EmployeeFilters,
    EmployeePatch,
    EmployeeStatus,
)
from console.schemas.location import Location, LocationDraft, LocationKind, LocationPatch

__all__ = [
    "Company",
    "CompanyDraft",
    "CompanyPatch",
    "Employee",
    "EmployeeDraft",
    "EmployeeFilters",
    "EmployeePatch",
    "EmployeeStatus",
    "EntityId",
    "Location",
    "LocationDraft",
    "LocationKind",
    "LocationPatch",
    "Record",
    "to_wire",
]
