"""SQLAlchemy models for MINEMAP."""

from datetime import datetime
from typing import Optional

from sqlalchemy import Float, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from minemap.catalog.models import Deposit
from minemap.database import Base


class MiningDeposit(Base):
    """One mineral deposit with its location and metadata."""

    __tablename__ = "mining_deposits"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    company_name: Mapped[str] = mapped_column(String(200), index=True)
    project_name: Mapped[str] = mapped_column(String(200))
    resource: Mapped[str] = mapped_column(String(50), index=True)
    latitude: Mapped[float] = mapped_column(Float)
    longitude: Mapped[float] = mapped_column(Float)
    country: Mapped[str] = mapped_column(String(100))
    status: Mapped[str] = mapped_column(String(20), default="Active")
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default="")
    created_at: Mapped[datetime] = mapped_column(
        default=datetime.utcnow, server_default=text("CURRENT_TIMESTAMP")
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(nullable=True)

    def to_deposit(self) -> Deposit:
        """Client-side record for this row."""
        return Deposit(
            id=self.id,
            company_name=self.company_name,
            project_name=self.project_name,
            resource=self.resource,
            latitude=self.latitude,
            longitude=self.longitude,
            country=self.country,
            status=self.status,
            description=self.description or "",
        )
