"""Selected-deposit details panel."""

from typing import Optional

from minemap.catalog.models import Deposit
from minemap.catalog.store import RecordStore


class SelectionPanel:
    """Tracks the selected deposit by id and resolves it through the store."""

    def __init__(self, store: RecordStore):
        self._store = store
        self._selected_id: Optional[int] = None

    @property
    def selected_id(self) -> Optional[int]:
        return self._selected_id

    @property
    def selected(self) -> Optional[Deposit]:
        if self._selected_id is None:
            return None
        return self._store.get(self._selected_id)

    def select(self, deposit_id: int) -> Optional[Deposit]:
        """Select a deposit; unknown ids clear the selection."""
        self._selected_id = deposit_id if deposit_id in self._store else None
        return self.selected

    def clear(self) -> None:
        self._selected_id = None

    def clear_if(self, deposit_id: int) -> bool:
        """Clear the selection if it points at deposit_id."""
        if self._selected_id == deposit_id:
            self._selected_id = None
            return True
        return False

    def details(self) -> Optional[dict]:
        """Display fields for the selected deposit, or None."""
        deposit = self.selected
        if deposit is None:
            return None
        details = {
            "id": deposit.id,
            "project_name": deposit.project_name,
            "company_name": deposit.company_name,
            "resource": deposit.resource,
            "color": deposit.color,
            "status": deposit.status,
            "country": deposit.country,
            "coordinates": f"{deposit.latitude:.4f}, {deposit.longitude:.4f}",
        }
        if deposit.description:
            details["description"] = deposit.description
        return details
