from datetime import date
from typing import Optional

from console.schemas.common import EntityId, Patch, Record


class CompanyDraft(Record):
    name: str
    city: str = ""
    country: str = ""
    province: str = ""
    postal_code: str = ""
    street: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    # denormalised counter maintained by whoever edits the company
    total_employees: int = 0
    founded_date: Optional[date] = None
    description: str = ""


class Company(CompanyDraft):
    id: EntityId


class CompanyPatch(Patch):
    name: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    province: Optional[str] = None
    postal_code: Optional[str] = None
    street: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    total_employees: Optional[int] = None
    founded_date: Optional[date] = None
    description: Optional[str] = None
