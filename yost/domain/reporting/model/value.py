"""Reporting domain value objects."""

from yost.domain.shared.model.value import ValueObject


class Holding(ValueObject):
    """A single investment position reported by a holdings provider."""

    ticker: str | None = None
    quantity: float
    cost_basis: float | None = None
    currency_code: str
