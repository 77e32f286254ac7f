"""DI provider for HTTP infrastructure."""

from typing import AsyncIterable, NewType

import httpx
from dishka import provide

from yost.config import Config
from yost.domain.reporting.port.holdings import HoldingsProvider
from yost.infrastructure.http.plaid import PlaidHoldingsProvider
from yost.util.di.base import Provider
from yost.util.di.scope import Scope

PlaidHttpClient = NewType("PlaidHttpClient", httpx.AsyncClient)


class HttpProvider(Provider):
    """DI provider for outbound HTTP adapters."""

    @provide(scope=Scope.APP)
    async def get_plaid_http_client(self, config: Config) -> AsyncIterable[PlaidHttpClient]:
        """Dedicated HTTP client authenticated against Plaid."""
        plaid = config.plaid
        async with httpx.AsyncClient(
            base_url=plaid.base_url,
            headers={
                "PLAID-CLIENT-ID": plaid.client_id,
                "PLAID-SECRET": plaid.secret.get_secret_value(),
            },
            timeout=plaid.timeout,
        ) as client:
            yield PlaidHttpClient(client)

    @provide(scope=Scope.APP, provides=HoldingsProvider)
    def get_holdings_provider(
        self, client: PlaidHttpClient, config: Config
    ) -> PlaidHoldingsProvider:
        return PlaidHoldingsProvider(client=client, client_name=config.plaid.client_name)
