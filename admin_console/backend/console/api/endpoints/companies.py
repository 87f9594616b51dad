from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from console import schemas
from console.api import crud
from console.db.session import get_db
from console.models.company import Company

router = APIRouter()


@router.get("", response_model=list[schemas.Company])
async def list_companies(
    country: Optional[str] = None,
    city: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_rows(db, Company, {"country": country, "city": city})


@router.get("/{company_id}", response_model=schemas.Company)
async def get_company(company_id: int, db: AsyncSession = Depends(get_db)):
    return await crud.get_row(db, Company, company_id)


@router.post("", response_model=schemas.Company, status_code=201)
async def create_company(body: schemas.CompanyDraft, db: AsyncSession = Depends(get_db)):
    return await crud.create_row(db, Company, body)


@router.patch("/{company_id}", response_model=schemas.Company)
async def update_company(
    company_id: int, body: schemas.CompanyPatch, db: AsyncSession = Depends(get_db)
):
    return await crud.patch_row(db, Company, company_id, body)


@router.delete("/{company_id}")
async def delete_company(company_id: int, db: AsyncSession = Depends(get_db)):
    await crud.delete_row(db, Company, company_id)
    return {}
