"""Create/edit form state and validation."""

import math
from dataclasses import asdict, dataclass, field
from typing import Optional

from loguru import logger

from minemap.catalog.models import RESOURCE_COLORS, Deposit, DepositStatus

REQUIRED_FIELDS = (
    "company_name",
    "project_name",
    "resource",
    "latitude",
    "longitude",
    "country",
)

# field -> (min, max)
COORDINATE_RANGES = {
    "latitude": (-90.0, 90.0),
    "longitude": (-180.0, 180.0),
}


class FormValidationError(ValueError):
    """Raised when the form cannot be turned into a payload."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Invalid form fields: {fields}")


@dataclass
class DepositForm:
    """Raw form values, as typed by the user."""

    company_name: str = ""
    project_name: str = ""
    resource: str = ""
    latitude: str = ""
    longitude: str = ""
    country: str = ""
    status: str = DepositStatus.ACTIVE.value
    description: str = ""

    @classmethod
    def from_deposit(cls, deposit: Deposit) -> "DepositForm":
        return cls(
            company_name=deposit.company_name,
            project_name=deposit.project_name,
            resource=deposit.resource,
            latitude=str(deposit.latitude),
            longitude=str(deposit.longitude),
            country=deposit.country,
            status=deposit.status,
            description=deposit.description,
        )


def _parse_coordinate(name: str, raw: str) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{name.capitalize()} must be a number") from None
    if not math.isfinite(value):
        raise ValueError(f"{name.capitalize()} must be a finite number")
    low, high = COORDINATE_RANGES[name]
    if not low <= value <= high:
        raise ValueError(f"{name.capitalize()} must be between {low:g} and {high:g}")
    return value


def validate_form(form: DepositForm) -> dict:
    """Normalize a form into a wire payload.

    Raises:
        FormValidationError: if a required field is blank, a coordinate does
            not parse to a finite in-range number, or the status is unknown.
    """
    values = {k: (v.strip() if isinstance(v, str) else v) for k, v in asdict(form).items()}
    errors: dict[str, str] = {}

    for name in REQUIRED_FIELDS:
        if not values[name]:
            errors[name] = "This field is required"

    coords: dict[str, float] = {}
    for name in COORDINATE_RANGES:
        if name in errors:
            continue
        try:
            coords[name] = _parse_coordinate(name, values[name])
        except ValueError as e:
            errors[name] = str(e)

    status = values["status"] or DepositStatus.ACTIVE.value
    if status not in {s.value for s in DepositStatus}:
        errors["status"] = f"Unknown status '{status}'"

    if errors:
        raise FormValidationError(errors)

    return {
        "company_name": values["company_name"],
        "project_name": values["project_name"],
        "resource": values["resource"],
        "latitude": coords["latitude"],
        "longitude": coords["longitude"],
        "country": values["country"],
        "status": status,
        "description": values["description"],
    }


@dataclass
class FormEditor:
    """Modal form for adding a deposit or editing an existing one."""

    form: DepositForm = field(default_factory=DepositForm)
    is_open: bool = False
    editing_id: Optional[int] = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    @property
    def title(self) -> str:
        return "Edit Deposit" if self.is_editing else "Add New Deposit"

    @staticmethod
    def resource_choices() -> list[str]:
        return list(RESOURCE_COLORS)

    @staticmethod
    def status_choices() -> list[str]:
        return [s.value for s in DepositStatus]

    def open_create(self) -> None:
        self.form = DepositForm()
        self.editing_id = None
        self.errors = {}
        self.is_open = True

    def open_edit(self, deposit: Deposit) -> None:
        self.form = DepositForm.from_deposit(deposit)
        self.editing_id = deposit.id
        self.errors = {}
        self.is_open = True

    def update(self, **values: str) -> None:
        """Set form fields by name."""
        for name, value in values.items():
            if not hasattr(self.form, name):
                raise AttributeError(f"Unknown form field '{name}'")
            setattr(self.form, name, value)

    def close(self) -> None:
        """Cancel or finish: hide the form and reset its fields."""
        self.form = DepositForm()
        self.editing_id = None
        self.errors = {}
        self.is_open = False

    def payload(self) -> dict:
        """Validated payload; records field errors on failure."""
        try:
            payload = validate_form(self.form)
        except FormValidationError as e:
            self.errors = e.errors
            logger.warning(f"Deposit form rejected: {e}")
            raise
        self.errors = {}
        return payload
