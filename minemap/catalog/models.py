"""Deposit record model, resource colors and the sample catalog.

Wire format is snake_case throughout (``company_name``, ``project_name``).
Server timestamps (``created_at``, ``updated_at``) may appear in responses;
the client-side record ignores them.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class DepositStatus(str, Enum):
    """Operating status of a deposit."""
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    EXPLORATION = "Exploration"


# Marker colors per resource kind
RESOURCE_COLORS: dict[str, str] = {
    "Gold": "#FFD700",
    "Silver": "#C0C0C0",
    "Copper": "#B87333",
    "Iron Ore": "#8B4513",
    "Platinum": "#E5E4E2",
    "Zinc": "#7F7F7F",
    "Lead": "#2F4F4F",
    "Nickel": "#D3D3D3",
}

DEFAULT_COLOR = "#666666"


def resource_color(resource: Optional[str]) -> str:
    """Marker color for a resource kind; unknown kinds get DEFAULT_COLOR."""
    if resource is None:
        return DEFAULT_COLOR
    return RESOURCE_COLORS.get(resource, DEFAULT_COLOR)


# Fields a client may send; id and timestamps are server-assigned
PAYLOAD_FIELDS = (
    "company_name",
    "project_name",
    "resource",
    "latitude",
    "longitude",
    "country",
    "status",
    "description",
)


@dataclass(frozen=True)
class Deposit:
    """A mineral deposit as held in the record store."""

    id: int
    company_name: str
    project_name: str
    resource: str
    latitude: float
    longitude: float
    country: str
    status: str = DepositStatus.ACTIVE.value
    description: str = ""

    @property
    def title(self) -> str:
        return f"{self.project_name} - {self.company_name}"

    @property
    def color(self) -> str:
        return resource_color(self.resource)

    def with_changes(self, **changes) -> "Deposit":
        """Copy of this record with some fields replaced."""
        return replace(self, **changes)

    def to_payload(self) -> dict:
        """Wire payload without the id."""
        return {name: getattr(self, name) for name in PAYLOAD_FIELDS}

    def to_dict(self) -> dict:
        return {"id": self.id, **self.to_payload()}

    @classmethod
    def from_dict(cls, data: dict) -> "Deposit":
        return cls(
            id=int(data["id"]),
            company_name=data["company_name"],
            project_name=data["project_name"],
            resource=data["resource"],
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            country=data["country"],
            status=data.get("status") or DepositStatus.ACTIVE.value,
            description=data.get("description") or "",
        )


SAMPLE_DEPOSITS: tuple[Deposit, ...] = (
    Deposit(
        id=1,
        company_name="Barrick Gold Corporation",
        project_name="Cortez Gold Mine",
        resource="Gold",
        latitude=40.2731,
        longitude=-116.6374,
        country="USA",
        status="Active",
        description="Large-scale gold mining operation in Nevada",
    ),
    Deposit(
        id=2,
        company_name="BHP",
        project_name="Escondida",
        resource="Copper",
        latitude=-24.2370,
        longitude=-69.0800,
        country="Chile",
        status="Active",
        description="World's largest copper mine",
    ),
    Deposit(
        id=3,
        company_name="Newmont Corporation",
        project_name="Boddington Gold Mine",
        resource="Gold",
        latitude=-32.7500,
        longitude=116.4000,
        country="Australia",
        status="Active",
        description="Major gold and copper mine in Western Australia",
    ),
    Deposit(
        id=4,
        company_name="Pan American Silver",
        project_name="Dolores Mine",
        resource="Silver",
        latitude=26.0833,
        longitude=-108.5000,
        country="Mexico",
        status="Active",
        description="Silver and gold mining operation",
    ),
    Deposit(
        id=5,
        company_name="Vale S.A.",
        project_name="Carajás Mine",
        resource="Iron Ore",
        latitude=-6.0000,
        longitude=-50.0000,
        country="Brazil",
        status="Active",
        description="One of the world's largest iron ore mines",
    ),
    Deposit(
        id=6,
        company_name="Fresnillo plc",
        project_name="Fresnillo Mine",
        resource="Silver",
        latitude=23.1667,
        longitude=-102.8833,
        country="Mexico",
        status="Active",
        description="World's largest silver mine",
    ),
)
