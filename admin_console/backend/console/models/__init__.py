from console.models.company import Company
from console.models.employee import Employee
from console.models.location import Location

__all__ = ["Company", "Employee", "Location"]
