"""SQL implementation of RecordStore."""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from yost.domain.record.model.aggregate import Record
from yost.domain.record.model.item import OPTIONAL_FIELDS, RecordItem, record_to_item
from yost.domain.record.model.value import AttributeFilter
from yost.domain.record.port.store import RecordStore
from yost.domain.shared.error import ConfigurationError, StorageUnavailableError
from yost.infrastructure.persistence.tables import records_table

logger = logging.getLogger(__name__)

_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}
_KEY_COLUMNS = ("display_name", "created_at")


def item_to_row(item: RecordItem) -> dict[str, Any]:
    """Expand a sparse item to a full row; absent optional fields become NULL."""
    row = dict(item)
    for name in OPTIONAL_FIELDS:
        row.setdefault(name, None)
    return row


def row_to_item(row: dict[str, Any]) -> RecordItem:
    """Collapse a row back to a sparse item by dropping NULL columns."""
    return {key: value for key, value in row.items() if value is not None}


class SQLAlchemyRecordStore(RecordStore):
    """RecordStore backed by the ``records`` table (SQLite or PostgreSQL)."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def put(self, record: Record) -> None:
        """Upsert on (display_name, created_at). Each put commits its own transaction."""
        row = item_to_row(record_to_item(record))
        dialect = self.session.bind.dialect.name
        insert = _INSERTS.get(dialect)
        if insert is None:
            raise ConfigurationError(f"Unsupported database dialect: {dialect}")
        stmt = insert(records_table).values(**row)
        stmt = stmt.on_conflict_do_update(
            index_elements=[records_table.c.display_name, records_table.c.created_at],
            set_={name: stmt.excluded[name] for name in row if name not in _KEY_COLUMNS},
        )
        try:
            await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Failed to put record %s@%d: %s", record.display_name, record.created_at, e)
            raise StorageUnavailableError(f"Record store unavailable: {e}") from e

    async def query(
        self,
        display_name: str,
        attribute_filter: AttributeFilter | None = None,
    ) -> list[RecordItem]:
        stmt = select(records_table).where(records_table.c.display_name == display_name)
        if attribute_filter is not None:
            column = records_table.c[attribute_filter.attribute]
            if attribute_filter.value:
                stmt = stmt.where(column.is_(True))
            else:
                stmt = stmt.where(column.is_not(True))
        stmt = stmt.order_by(records_table.c.created_at)

        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Failed to query records for %s: %s", display_name, e)
            raise StorageUnavailableError(f"Record store unavailable: {e}") from e

        return [row_to_item(dict(row)) for row in result.mappings().all()]
