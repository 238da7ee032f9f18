"""Company listing endpoint."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from minemap.database import get_db
from minemap.models import MiningDeposit

router = APIRouter(prefix="/api/companies", tags=["companies"])


class CompanyResponse(BaseModel):
    """A company and how many deposits it operates."""

    company_name: str
    deposits: int


@router.get("", response_model=list[CompanyResponse])
async def list_companies(db: AsyncSession = Depends(get_db)):
    """List distinct companies with deposit counts."""
    result = await db.execute(
        select(MiningDeposit.company_name, func.count(MiningDeposit.id))
        .group_by(MiningDeposit.company_name)
        .order_by(MiningDeposit.company_name)
    )
    return [
        CompanyResponse(company_name=name, deposits=count)
        for name, count in result.all()
    ]
