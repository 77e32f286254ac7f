"""Sparse item representation of a Record.

Optional attributes are written only when they differ from their zero value
(False / ""), and readers substitute the zero value when an attribute is
absent. Every RecordStore adapter stores and returns items in this shape.
"""

from typing import Any

from yost.domain.record.model.aggregate import Record

RecordItem = dict[str, Any]

OPTIONAL_FIELDS = ("has_verified_link", "is_verified_user", "verification_link")


def record_to_item(record: Record) -> RecordItem:
    """Convert a Record to its sparse item form."""
    item: RecordItem = {
        "display_name": record.display_name,
        "blob_key": record.blob_key,
        "created_at": record.created_at,
        "visible_after": record.visible_after,
    }
    if record.has_verified_link:
        item["has_verified_link"] = True
    if record.is_verified_user:
        item["is_verified_user"] = True
    if record.verification_link:
        item["verification_link"] = record.verification_link
    return item


def item_to_record(item: RecordItem) -> Record:
    """Convert a raw item to a Record, defaulting anything that is missing."""
    return Record(
        display_name=item.get("display_name") or "",
        blob_key=item.get("blob_key") or "",
        created_at=int(item.get("created_at") or 0),
        visible_after=int(item.get("visible_after") or 0),
        has_verified_link=bool(item.get("has_verified_link") or False),
        is_verified_user=bool(item.get("is_verified_user") or False),
        verification_link=item.get("verification_link") or "",
    )
