"""Client-side deposit catalog: records, filters, selection and forms."""

from minemap.catalog.models import Deposit, DepositStatus, resource_color
from minemap.catalog.store import RecordStore
from minemap.catalog.filters import ALL_RESOURCES, filter_deposits
from minemap.catalog.forms import FormEditor, FormValidationError
from minemap.catalog.selection import SelectionPanel
from minemap.catalog.client import BackingStoreError, DepositClient

__all__ = [
    "Deposit",
    "DepositStatus",
    "resource_color",
    "RecordStore",
    "ALL_RESOURCES",
    "filter_deposits",
    "FormEditor",
    "FormValidationError",
    "SelectionPanel",
    "BackingStoreError",
    "DepositClient",
]
