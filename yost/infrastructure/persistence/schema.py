"""Records table provisioning.

Checks whether the records table exists and creates it (with its index) when
it does not. Safe to run on every startup.
"""

import logging

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from yost.domain.shared.error import StorageUnavailableError
from yost.infrastructure.persistence.tables import metadata, records_table

logger = logging.getLogger(__name__)


async def ensure_records_table(engine: AsyncEngine) -> bool:
    """Create the records table if missing.

    Returns:
        True if the table was created, False if it already existed.
    """
    try:
        async with engine.begin() as conn:
            exists = await conn.run_sync(
                lambda sync_conn: inspect(sync_conn).has_table(records_table.name)
            )
            if exists:
                logger.info("Table %s already exists.", records_table.name)
                return False

            logger.info("Table %s not found. Creating it...", records_table.name)
            await conn.run_sync(metadata.create_all, tables=[records_table])
    except SQLAlchemyError as e:
        raise StorageUnavailableError(f"Could not provision {records_table.name}: {e}") from e

    logger.info("Table %s created successfully.", records_table.name)
    return True
