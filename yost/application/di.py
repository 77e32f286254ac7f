from dishka import AsyncContainer, from_context, make_async_container
from starlette.requests import Request

from yost.config import Config
from yost.domain.record.util.di import RecordProvider
from yost.domain.reporting.util.di import ReportingProvider
from yost.infrastructure.http.di import HttpProvider
from yost.infrastructure.persistence import PersistenceProvider
from yost.infrastructure.storage.di import StorageProvider
from yost.util.di.base import Provider
from yost.util.di.scope import Scope


class ContextProvider(Provider):
    """Values handed to the container from outside rather than built by it."""

    config = from_context(provides=Config, scope=Scope.APP)
    request = from_context(provides=Request, scope=Scope.UOW)


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_async_container(
        ContextProvider(),
        PersistenceProvider(),
        StorageProvider(),
        HttpProvider(),
        RecordProvider(),
        ReportingProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
