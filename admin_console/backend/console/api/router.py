from fastapi import APIRouter

from console.api.endpoints import companies, employees, locations, reports


router = APIRouter()

router.include_router(employees.router, prefix="/employees", tags=["employees"])
router.include_router(companies.router, prefix="/companies", tags=["companies"])
router.include_router(locations.router, prefix="/locations", tags=["locations"])

router.include_router(reports.router, prefix="/reports", tags=["reports"])
