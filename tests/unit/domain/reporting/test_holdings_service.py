"""Unit tests for HoldingsService."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from yost.domain.reporting.model.value import Holding
from yost.domain.reporting.port.holdings import HoldingsProvider
from yost.domain.reporting.service.holdings import HoldingsService
from yost.domain.shared.error import ExternalServiceError, ValidationError


@pytest.fixture
def mock_provider() -> HoldingsProvider:
    provider = MagicMock(spec=HoldingsProvider)
    provider.create_link_token = AsyncMock(return_value="link-1")
    provider.exchange_token = AsyncMock(return_value="access-1")
    provider.get_holdings = AsyncMock(
        return_value=[Holding(ticker="AAPL", quantity=1, currency_code="USD")]
    )
    return provider


@pytest.fixture
def service(mock_provider: HoldingsProvider) -> HoldingsService:
    return HoldingsService(holdings_provider=mock_provider)


class TestHoldingsService:
    @pytest.mark.asyncio
    async def test_create_link_token(self, service, mock_provider):
        assert await service.create_link_token("user-1") == "link-1"
        mock_provider.create_link_token.assert_called_once_with("user-1")

    @pytest.mark.asyncio
    async def test_exchange_token(self, service, mock_provider):
        assert await service.exchange_token("public-1") == "access-1"
        mock_provider.exchange_token.assert_called_once_with("public-1")

    @pytest.mark.asyncio
    async def test_exchange_rejects_empty_token(self, service, mock_provider):
        with pytest.raises(ValidationError) as exc_info:
            await service.exchange_token("")
        assert exc_info.value.field == "public_token"
        mock_provider.exchange_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_holdings(self, service):
        holdings = await service.get_holdings("access-1")

        assert holdings[0].ticker == "AAPL"

    @pytest.mark.asyncio
    async def test_get_holdings_rejects_empty_token(self, service, mock_provider):
        with pytest.raises(ValidationError):
            await service.get_holdings("")
        mock_provider.get_holdings.assert_not_called()

    @pytest.mark.asyncio
    async def test_provider_failure_propagates(self, service, mock_provider):
        mock_provider.get_holdings.side_effect = ExternalServiceError("plaid down")

        with pytest.raises(ExternalServiceError):
            await service.get_holdings("access-1")
