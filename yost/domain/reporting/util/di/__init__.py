from yost.domain.reporting.util.di.provider import ReportingProvider

__all__ = ["ReportingProvider"]
