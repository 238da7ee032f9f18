"""In-memory record store for the current session."""

from typing import Iterable, Iterator, Optional

from loguru import logger

from minemap.catalog.models import Deposit


class RecordStore:
    """Ordered collection of deposits keyed by id.

    Holds only confirmed server state: callers add or replace records after
    the backing store has acknowledged the write.
    """

    def __init__(self, records: Optional[Iterable[Deposit]] = None):
        self._records: list[Deposit] = []
        if records is not None:
            self.load(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Deposit]:
        return iter(self._records)

    def __contains__(self, deposit_id: object) -> bool:
        return self._index_of(deposit_id) is not None

    def _index_of(self, deposit_id: object) -> Optional[int]:
        for i, record in enumerate(self._records):
            if record.id == deposit_id:
                return i
        return None

    def all(self) -> list[Deposit]:
        """Snapshot of the records in store order."""
        return list(self._records)

    def ids(self) -> list[int]:
        return [r.id for r in self._records]

    def get(self, deposit_id: int) -> Optional[Deposit]:
        index = self._index_of(deposit_id)
        return None if index is None else self._records[index]

    def load(self, records: Iterable[Deposit]) -> None:
        """Replace the whole collection.

        Later duplicates of an id overwrite earlier ones in place.
        """
        self._records = []
        for record in records:
            self.add(record)
        logger.info(f"Record store loaded with {len(self._records)} deposits")

    def add(self, record: Deposit) -> None:
        """Append a record; an existing id is replaced where it stands."""
        index = self._index_of(record.id)
        if index is not None:
            logger.warning(f"Deposit {record.id} already in store, replacing")
            self._records[index] = record
            return
        self._records.append(record)

    def replace(self, deposit_id: int, record: Deposit) -> bool:
        """Swap the entry with the given id, keeping its position."""
        index = self._index_of(deposit_id)
        if index is None:
            logger.warning(f"Cannot replace deposit {deposit_id}: not in store")
            return False
        self._records[index] = record
        return True

    def remove(self, deposit_id: int) -> bool:
        """Drop the entry with the given id."""
        index = self._index_of(deposit_id)
        if index is None:
            logger.warning(f"Cannot remove deposit {deposit_id}: not in store")
            return False
        del self._records[index]
        return True
