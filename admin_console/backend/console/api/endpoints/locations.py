from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from console import schemas
from console.api import crud
from console.db.session import get_db
from console.models.location import Location

router = APIRouter()


@router.get("", response_model=list[schemas.Location])
async def list_locations(
    country: Optional[str] = None,
    kind: Optional[schemas.LocationKind] = None,
    active: Optional[bool] = None,
    db: AsyncSession = Depends(get_db),
):
    filters = {
        "country": country,
        "kind": kind.value if kind else None,
        "active": active,
    }
    return await crud.list_rows(db, Location, filters)


@router.get("/{location_id}", response_model=schemas.Location)
async def get_location(location_id: int, db: AsyncSession = Depends(get_db)):
    return await crud.get_row(db, Location, location_id)


@router.post("", response_model=schemas.Location, status_code=201)
async def create_location(body: schemas.LocationDraft, db: AsyncSession = Depends(get_db)):
    return await crud.create_row(db, Location, body)


@router.patch("/{location_id}", response_model=schemas.Location)
async def update_location(
    location_id: int, body: schemas.LocationPatch, db: AsyncSession = Depends(get_db)
):
    return await crud.patch_row(db, Location, location_id, body)


@router.delete("/{location_id}")
async def delete_location(location_id: int, db: AsyncSession = Depends(get_db)):
    await crud.delete_row(db, Location, location_id)
    return {}
