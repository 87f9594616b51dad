from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from console import schemas
from console.api import crud
from console.db.session import get_db
from console.models.employee import Employee

router = APIRouter()


@router.get("", response_model=list[schemas.Employee])
async def list_employees(
    department: Optional[str] = None,
    status: Optional[schemas.EmployeeStatus] = None,
    company_id: Optional[int] = Query(None, alias="companyId"),
    db: AsyncSession = Depends(get_db),
):
    filters = {
        "department": department,
        "status": status.value if status else None,
        "company_id": company_id,
    }
    return await crud.list_rows(db, Employee, filters)


@router.get("/{emp_id}", response_model=schemas.Employee)
async def get_employee(emp_id: int, db: AsyncSession = Depends(get_db)):
    return await crud.get_row(db, Employee, emp_id)


@router.post("", response_model=schemas.Employee, status_code=201)
async def create_employee(body: schemas.EmployeeDraft, db: AsyncSession = Depends(get_db)):
    return await crud.create_row(db, Employee, body)


@router.patch("/{emp_id}", response_model=schemas.Employee)
async def update_employee(
    emp_id: int, body: schemas.EmployeePatch, db: AsyncSession = Depends(get_db)
):
    return await crud.patch_row(db, Employee, emp_id, body)


@router.delete("/{emp_id}")
async def delete_employee(emp_id: int, db: AsyncSession = Depends(get_db)):
    await crud.delete_row(db, Employee, emp_id)
    return {}
