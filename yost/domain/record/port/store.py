"""RecordStore port - key-value persistence for records."""

from abc import abstractmethod
from typing import Protocol

from yost.domain.record.model.aggregate import Record
from yost.domain.record.model.item import RecordItem
from yost.domain.record.model.value import AttributeFilter
from yost.domain.shared.port import Port


class RecordStore(Port, Protocol):
    """Partitioned by display_name, sorted by created_at.

    Implementations raise StorageUnavailableError on any backend failure and
    return an empty list (never an error) when nothing matches.
    """

    @abstractmethod
    async def put(self, record: Record) -> None:
        """Insert a record. Re-putting the same identity replaces it."""
        ...

    @abstractmethod
    async def query(
        self,
        display_name: str,
        attribute_filter: AttributeFilter | None = None,
    ) -> list[RecordItem]:
        """Return sparse items for a partition key, optionally pre-filtered."""
        ...
