"""Plaid adapter for the HoldingsProvider port."""

import logging
from typing import Any
from uuid import uuid4

import httpx

from yost.domain.reporting.model.value import Holding
from yost.domain.reporting.port.holdings import HoldingsProvider
from yost.domain.shared.error import ExternalServiceError

logger = logging.getLogger(__name__)


class PlaidHoldingsProvider(HoldingsProvider):
    """Talks to Plaid's REST API using httpx.

    The client is expected to carry the Plaid base URL and the
    PLAID-CLIENT-ID / PLAID-SECRET headers.
    """

    def __init__(self, client: httpx.AsyncClient, client_name: str = "YOST") -> None:
        self._client = client
        self._client_name = client_name

    async def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            response = await self._client.post(path, json=payload)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error("Plaid %s failed with %d", path, e.response.status_code)
            raise ExternalServiceError(
                f"Plaid {path} failed with status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error("Plaid %s unreachable: %s", path, e)
            raise ExternalServiceError(f"Plaid {path} unreachable: {e}") from e
        except ValueError as e:
            logger.error("Plaid %s returned a malformed body: %s", path, e)
            raise ExternalServiceError(f"Plaid {path} returned a malformed body") from e

    async def _post_for(self, path: str, payload: dict[str, Any], key: str) -> str:
        data = await self._post(path, payload)
        try:
            return data[key]
        except (KeyError, TypeError) as e:
            logger.error("Plaid %s response missing %s", path, key)
            raise ExternalServiceError(f"Plaid {path} response missing {key}") from e

    async def create_link_token(self, user_id: str | None = None) -> str:
        return await self._post_for(
            "/link/token/create",
            {
                "user": {"client_user_id": user_id or str(uuid4())},
                "client_name": self._client_name,
                "products": ["investments"],
                "language": "en",
                "country_codes": ["US"],
            },
            "link_token",
        )

    async def exchange_token(self, public_token: str) -> str:
        return await self._post_for(
            "/item/public_token/exchange", {"public_token": public_token}, "access_token"
        )

    async def get_holdings(self, access_token: str) -> list[Holding]:
        data = await self._post("/investments/holdings/get", {"access_token": access_token})

        try:
            tickers = {
                security["security_id"]: security.get("ticker_symbol")
                for security in data.get("securities", [])
            }
            return [
                Holding(
                    ticker=tickers.get(holding.get("security_id")) or None,
                    quantity=holding["quantity"],
                    cost_basis=holding.get("cost_basis") or None,
                    # Plaid sets exactly one of the two currency codes
                    currency_code=holding.get("iso_currency_code")
                    or holding.get("unofficial_currency_code")
                    or "",
                )
                for holding in data.get("holdings", [])
            ]
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            logger.error("Plaid holdings response is malformed: %s", e)
            raise ExternalServiceError(
                "Plaid /investments/holdings/get returned a malformed body"
            ) from e
