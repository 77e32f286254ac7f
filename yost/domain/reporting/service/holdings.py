"""HoldingsService - pass-through to the configured HoldingsProvider."""

import logging

from yost.domain.reporting.model.value import Holding
from yost.domain.reporting.port.holdings import HoldingsProvider
from yost.domain.shared.error import ValidationError
from yost.domain.shared.service import Service

logger = logging.getLogger(__name__)


class HoldingsService(Service):
    holdings_provider: HoldingsProvider

    async def create_link_token(self, user_id: str | None = None) -> str:
        token = await self.holdings_provider.create_link_token(user_id)
        logger.debug("Link token created for user_id=%s", user_id or "<generated>")
        return token

    async def exchange_token(self, public_token: str) -> str:
        if not public_token:
            raise ValidationError("public_token must not be empty", field="public_token")
        return await self.holdings_provider.exchange_token(public_token)

    async def get_holdings(self, access_token: str) -> list[Holding]:
        if not access_token:
            raise ValidationError("access_token must not be empty", field="access_token")
        holdings = await self.holdings_provider.get_holdings(access_token)
        logger.debug("Fetched %d holdings", len(holdings))
        return holdings
