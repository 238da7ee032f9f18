"""Deposit collection endpoints."""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from pydantic import BaseModel, Field
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from minemap.catalog.models import DepositStatus
from minemap.database import get_db
from minemap.models import MiningDeposit

router = APIRouter(prefix="/api/deposits", tags=["deposits"])


class DepositCreate(BaseModel):
    """Schema for creating a deposit."""

    company_name: str = Field(min_length=1)
    project_name: str = Field(min_length=1)
    resource: str = Field(min_length=1)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    country: str = Field(min_length=1)
    status: DepositStatus = DepositStatus.ACTIVE
    description: str = ""


class DepositUpdate(BaseModel):
    """Schema for a full or partial deposit update."""

    company_name: Optional[str] = Field(default=None, min_length=1)
    project_name: Optional[str] = Field(default=None, min_length=1)
    resource: Optional[str] = Field(default=None, min_length=1)
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    country: Optional[str] = Field(default=None, min_length=1)
    status: Optional[DepositStatus] = None
    description: Optional[str] = None


class DepositResponse(BaseModel):
    """Schema for deposit response."""

    id: int
    company_name: str
    project_name: str
    resource: str
    latitude: float
    longitude: float
    country: str
    status: str
    description: Optional[str]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


async def _get_or_404(db: AsyncSession, deposit_id: int) -> MiningDeposit:
    result = await db.execute(select(MiningDeposit).where(MiningDeposit.id == deposit_id))
    deposit = result.scalar_one_or_none()
    if not deposit:
        raise HTTPException(status_code=404, detail="Deposit not found")
    return deposit


@router.get("", response_model=list[DepositResponse])
async def list_deposits(db: AsyncSession = Depends(get_db)):
    """List all deposits."""
    try:
        result = await db.execute(select(MiningDeposit).order_by(MiningDeposit.id))
    except SQLAlchemyError as e:
        logger.error(f"Fetch deposits failed: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch deposits")
    return result.scalars().all()


@router.get("/{deposit_id}", response_model=DepositResponse)
async def get_deposit(deposit_id: int, db: AsyncSession = Depends(get_db)):
    """Get a specific deposit."""
    return await _get_or_404(db, deposit_id)


@router.post("", response_model=DepositResponse)
async def create_deposit(deposit: DepositCreate, db: AsyncSession = Depends(get_db)):
    """Create a new deposit."""
    db_deposit = MiningDeposit(**deposit.model_dump(mode="json"))
    try:
        db.add(db_deposit)
        await db.flush()
        await db.refresh(db_deposit)
    except SQLAlchemyError as e:
        logger.error(f"Create deposit failed: {e}")
        raise HTTPException(status_code=500, detail="Failed to create deposit")
    logger.info(f"Created deposit {db_deposit.id} '{db_deposit.project_name}'")
    return db_deposit


@router.put("/{deposit_id}", response_model=DepositResponse)
async def update_deposit(
    deposit_id: int, deposit: DepositUpdate, db: AsyncSession = Depends(get_db)
):
    """Update some or all fields of a deposit."""
    db_deposit = await _get_or_404(db, deposit_id)

    update_data = deposit.model_dump(mode="json", exclude_unset=True)
    # null clears the optional description; other fields are required columns
    if "description" in update_data and update_data["description"] is None:
        update_data["description"] = ""
    update_data = {k: v for k, v in update_data.items() if v is not None}
    for field, value in update_data.items():
        setattr(db_deposit, field, value)
    db_deposit.updated_at = datetime.utcnow()

    try:
        await db.flush()
        await db.refresh(db_deposit)
    except SQLAlchemyError as e:
        logger.error(f"Update deposit {deposit_id} failed: {e}")
        raise HTTPException(status_code=500, detail="Failed to update deposit")
    return db_deposit


@router.delete("/{deposit_id}")
async def delete_deposit(deposit_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a deposit."""
    db_deposit = await _get_or_404(db, deposit_id)
    try:
        await db.delete(db_deposit)
        await db.flush()
    except SQLAlchemyError as e:
        logger.error(f"Delete deposit {deposit_id} failed: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete deposit")
    logger.info(f"Deleted deposit {deposit_id}")
    return {"success": True}
