"""Catalog session: the client-side state of one map page.

Wires the record store, filters, selection, form editor and map view to a
backing-store client. Every user action is one call here; network failures
are logged, turned into a visible notice, and leave state untouched. Nothing
is retried.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from loguru import logger

from minemap.catalog.client import BackingStoreError, DepositClient
from minemap.catalog.filters import ALL_RESOURCES, filter_deposits, legend, unique_resources
from minemap.catalog.forms import FormEditor, FormValidationError
from minemap.catalog.models import Deposit
from minemap.catalog.selection import SelectionPanel
from minemap.catalog.store import RecordStore
from minemap.mapview.controller import ViewStateController
from minemap.mapview.markers import MarkerPlacement


@dataclass
class Notice:
    """A failure message shown to the user until dismissed."""

    message: str
    action: str
    created_at: datetime = field(default_factory=datetime.now)


class CatalogSession:
    """Client-side state for browsing and editing the deposit catalog."""

    def __init__(self, client: DepositClient, view: Optional[ViewStateController] = None):
        self.client = client
        self.store = RecordStore()
        self.selection = SelectionPanel(self.store)
        self.editor = FormEditor()
        self.view = view or ViewStateController()
        self.search = ""
        self.resource_filter = ALL_RESOURCES
        self.notices: list[Notice] = []
        self.loaded = False

    # ==================
    # Startup
    # ==================

    async def start(self) -> bool:
        """Load the full collection once."""
        try:
            deposits = await self.client.list_deposits()
        except BackingStoreError as e:
            self._fail("load", "Failed to load deposits", e)
            return False
        self.store.load(deposits)
        self.loaded = True
        return True

    # ==================
    # Browsing
    # ==================

    def set_search(self, text: str) -> None:
        self.search = text

    def set_resource_filter(self, resource: str) -> None:
        self.resource_filter = resource

    @property
    def visible(self) -> list[Deposit]:
        """Records passing the current search and resource filter."""
        return filter_deposits(self.store, self.search, self.resource_filter)

    def resource_options(self) -> list[str]:
        return [ALL_RESOURCES] + unique_resources(self.store)

    def legend(self) -> list[tuple[str, str]]:
        return legend(self.store)

    def markers(self) -> list[MarkerPlacement]:
        return self.view.markers(self.visible, self.selection.selected_id)

    def select(self, deposit_id: int) -> Optional[Deposit]:
        return self.selection.select(deposit_id)

    def clear_selection(self) -> None:
        self.selection.clear()

    # ==================
    # Editing
    # ==================

    def open_create(self) -> None:
        self.editor.open_create()

    def open_edit(self, deposit_id: Optional[int] = None) -> bool:
        """Open the editor on a deposit, by default the selected one."""
        deposit = (
            self.selection.selected if deposit_id is None else self.store.get(deposit_id)
        )
        if deposit is None:
            return False
        self.editor.open_edit(deposit)
        return True

    def cancel_edit(self) -> None:
        self.editor.close()

    async def submit(self) -> Optional[Deposit]:
        """Validate the form and write it to the backing store.

        The store is only touched once the write is confirmed. On any failure
        the editor stays open with its current values.
        """
        try:
            payload = self.editor.payload()
        except FormValidationError:
            return None

        editing_id = self.editor.editing_id
        try:
            if editing_id is None:
                deposit = await self.client.create_deposit(payload)
            else:
                deposit = await self.client.update_deposit(editing_id, payload)
        except BackingStoreError as e:
            action = "create" if editing_id is None else "update"
            self._fail(action, f"Failed to {action} deposit", e)
            return None

        if editing_id is None:
            self.store.add(deposit)
            logger.info(f"Added deposit {deposit.id} ({deposit.project_name})")
        else:
            self.store.replace(editing_id, deposit)
            logger.info(f"Updated deposit {deposit.id} ({deposit.project_name})")
        self.editor.close()
        return deposit

    async def delete(self, deposit_id: Optional[int] = None) -> bool:
        """Delete a deposit, by default the selected one."""
        if deposit_id is None:
            deposit_id = self.selection.selected_id
        if deposit_id is None:
            return False

        try:
            await self.client.delete_deposit(deposit_id)
        except BackingStoreError as e:
            self._fail("delete", "Failed to delete deposit", e)
            return False

        self.store.remove(deposit_id)
        self.selection.clear_if(deposit_id)
        if self.editor.editing_id == deposit_id:
            self.editor.close()
        logger.info(f"Deleted deposit {deposit_id}")
        return True

    # ==================
    # Notices
    # ==================

    def _fail(self, action: str, message: str, error: BackingStoreError) -> None:
        logger.error(f"{message}: {error}")
        self.notices.append(Notice(message=message, action=action))

    def dismiss_notice(self, index: int = 0) -> None:
        if 0 <= index < len(self.notices):
            self.notices.pop(index)
