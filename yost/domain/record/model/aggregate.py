"""Record aggregate - immutable, cooldown-gated entry keyed by display name."""

from yost.domain.shared.model.aggregate import Aggregate


class Record(Aggregate):
    """A stored record. Identity is (display_name, created_at).

    Timestamps are unix seconds. A record is only returned by queries once
    the current time has reached ``visible_after``.
    """

    display_name: str
    blob_key: str
    created_at: int
    visible_after: int
    has_verified_link: bool = False
    is_verified_user: bool = False
    verification_link: str = ""

    def is_visible_at(self, now: int) -> bool:
        return self.visible_after <= now
