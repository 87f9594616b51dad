# console/api/crud.py
# Shared row helpers for the json-server style collection endpoints.

from enum import Enum
from typing import Any

from fastapi import HTTPException
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession


def column_values(body: BaseModel, partial: bool = False) -> dict[str, Any]:
    data = body.model_dump(exclude_unset=partial, exclude_none=partial)
    return {k: (v.value if isinstance(v, Enum) else v) for k, v in data.items()}


async def list_rows(db: AsyncSession, model, filters: dict[str, Any]):
    stmt = select(model)
    for column, value in filters.items():
        if value is not None:
            stmt = stmt.where(getattr(model, column) == value)
    res = await db.execute(stmt.order_by(model.id))
    return res.scalars().all()


async def get_row(db: AsyncSession, model, row_id: int):
    row = (await db.execute(select(model).where(model.id == row_id))).scalar_one_or_none()
    if row is None:
        raise HTTPException(status_code=404, detail=f"{model.__tablename__} {row_id} not found")
    return row


async def create_row(db: AsyncSession, model, body: BaseModel):
    row = model(**column_values(body))
    db.add(row)
    await db.commit()
    await db.refresh(row)
    return row


async def patch_row(db: AsyncSession, model, row_id: int, body: BaseModel):
    row = await get_row(db, model, row_id)
    for column, value in column_values(body, partial=True).items():
        setattr(row, column, value)
    await db.commit()
    await db.refresh(row)
    return row


async def delete_row(db: AsyncSession, model, row_id: int) -> None:
    row = await get_row(db, model, row_id)
    await db.delete(row)
    await db.commit()
