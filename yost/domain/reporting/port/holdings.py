"""HoldingsProvider port - third-party brokerage data."""

from abc import abstractmethod
from typing import Protocol

from yost.domain.reporting.model.value import Holding
from yost.domain.shared.port import Port


class HoldingsProvider(Port, Protocol):
    """Links a user's brokerage account and reads its holdings.

    Implementations raise ExternalServiceError when the provider fails.
    """

    @abstractmethod
    async def create_link_token(self, user_id: str | None = None) -> str:
        """Create a short-lived token the client uses to start account linking."""
        ...

    @abstractmethod
    async def exchange_token(self, public_token: str) -> str:
        """Exchange a public token from the link flow for a long-lived access token."""
        ...

    @abstractmethod
    async def get_holdings(self, access_token: str) -> list[Holding]: ...
