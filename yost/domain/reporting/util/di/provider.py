from dishka import provide

from yost.domain.reporting.service.holdings import HoldingsService
from yost.util.di.base import Provider
from yost.util.di.scope import Scope


class ReportingProvider(Provider):
    holdings_service = provide(HoldingsService, scope=Scope.UOW)
