"""Record store provisioning commands."""

import asyncio
import sys

import cyclopts

from yost.cli.console import get_console
from yost.config import Config, configure_logging
from yost.domain.shared.error import StorageUnavailableError
from yost.infrastructure.persistence.database import create_db_engine
from yost.infrastructure.persistence.schema import ensure_records_table

app = cyclopts.App(name="db", help="Record store management commands")


async def _init(config: Config) -> bool:
    engine = create_db_engine(config.database)
    try:
        return await ensure_records_table(engine)
    finally:
        await engine.dispose()


@app.command
def init() -> None:
    """Create the records table if it does not exist yet."""
    console = get_console()
    config = Config()  # type: ignore[call-arg]
    configure_logging(config.logging)

    try:
        created = asyncio.run(_init(config))
    except StorageUnavailableError as e:
        console.error(e.message, hint="Check YOST_DATABASE__URL")
        sys.exit(1)

    if created:
        console.success("Records table created")
    else:
        console.info("Records table already exists")
