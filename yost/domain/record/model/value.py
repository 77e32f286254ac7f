"""Record domain value objects."""

from typing import Literal

from yost.domain.shared.model.value import ValueObject

# Minimum delay between a record's creation and its earliest visibility.
COOLDOWN_WINDOW_SECONDS = 10 * 60

FilterableAttribute = Literal["has_verified_link", "is_verified_user"]


class AttributeFilter(ValueObject):
    """A single equality predicate a RecordStore may apply server-side.

    Example:
        AttributeFilter(attribute="has_verified_link", value=True)
    """

    attribute: FilterableAttribute
    value: bool
