from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from console import schemas
from console.api import crud
from console.db.session import get_db
from console.models.employee import Employee
from console.stats.aggregation import summarize

router = APIRouter()


@router.get("/employees/summary")
async def employee_summary(
    department: Optional[str] = None,
    status: Optional[schemas.EmployeeStatus] = None,
    company_id: Optional[int] = Query(None, alias="companyId"),
    db: AsyncSession = Depends(get_db),
):
    rows = await crud.list_rows(
        db,
        Employee,
        {
            "department": department,
            "status": status.value if status else None,
            "company_id": company_id,
        },
    )
    employees = [schemas.Employee.model_validate(row) for row in rows]
    return summarize(employees, decimals=2).to_dict()
