"""RecordService - writes cooldown-gated records and answers lookups."""

import logging
import math
import time
from collections.abc import Callable

from yost.domain.record.model.aggregate import Record
from yost.domain.record.model.item import item_to_record
from yost.domain.record.model.value import COOLDOWN_WINDOW_SECONDS, AttributeFilter
from yost.domain.record.port.store import RecordStore
from yost.domain.shared.error import InvalidAttributeCombinationError
from yost.domain.shared.service import Service

logger = logging.getLogger(__name__)


class RecordService(Service):
    """Validates and persists records, and filters them by visibility on read.

    Every call is a single round-trip to the RecordStore. Store failures
    propagate unchanged.
    """

    record_store: RecordStore
    clock: Callable[[], float] = time.time

    def _now(self) -> int:
        return math.floor(self.clock())

    async def save(
        self,
        display_name: str,
        blob_key: str,
        has_verified_link: bool = False,
        visible_after: int | None = None,
        is_verified_user: bool = False,
        verification_link: str | None = None,
    ) -> Record:
        """Validate, normalize and persist a new record.

        Args:
            display_name: Partition key of the record.
            blob_key: Opaque reference to the record's content.
            has_verified_link: Whether a verification link is attached.
            visible_after: Requested earliest visibility (unix seconds). Raised
                to created_at + COOLDOWN_WINDOW_SECONDS when earlier.
            is_verified_user: Whether the owner is verified.
            verification_link: The link; required iff has_verified_link.

        Returns:
            The persisted Record.

        Raises:
            InvalidAttributeCombinationError: The link flag and the link disagree.
        """
        if has_verified_link and not verification_link:
            raise InvalidAttributeCombinationError(
                "verification_link must be provided if has_verified_link is true",
                field="verification_link",
            )
        if verification_link and not has_verified_link:
            raise InvalidAttributeCombinationError(
                "has_verified_link must be true if verification_link is provided",
                field="has_verified_link",
            )

        created_at = self._now()
        floor = created_at + COOLDOWN_WINDOW_SECONDS
        if visible_after is None or visible_after < floor:
            visible_after = floor

        record = Record(
            display_name=display_name,
            blob_key=blob_key,
            created_at=created_at,
            visible_after=visible_after,
            has_verified_link=has_verified_link,
            is_verified_user=is_verified_user,
            verification_link=verification_link or "",
        )

        await self.record_store.put(record)
        logger.debug(
            "Record persisted: display_name=%s created_at=%d visible_after=%d",
            display_name,
            created_at,
            visible_after,
        )
        return record

    async def query(
        self,
        display_name: str,
        has_verified_link: bool | None = None,
        is_verified_user: bool | None = None,
    ) -> list[Record]:
        """Return the visible records for a display name, in store order.

        Records still inside their cooldown are never returned. The
        has_verified_link flag is pushed down to the store; is_verified_user
        is applied here. Flags left unset (or False) do not filter.
        """
        attribute_filter = (
            AttributeFilter(attribute="has_verified_link", value=True)
            if has_verified_link
            else None
        )
        items = await self.record_store.query(display_name, attribute_filter)

        now = self._now()
        records = [r for r in map(item_to_record, items) if r.is_visible_at(now)]
        if is_verified_user:
            records = [r for r in records if r.is_verified_user]

        logger.debug(
            "Query for %s: %d candidates, %d visible at %d",
            display_name,
            len(items),
            len(records),
            now,
        )
        return records
