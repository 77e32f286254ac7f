"""Tests for mapping YOST errors to HTTP responses."""

from yost.application.api.v1.errors import map_yost_error
from yost.domain.shared.error import (
    ConfigurationError,
    DomainError,
    ExternalServiceError,
    InvalidAttributeCombinationError,
    NotFoundError,
    StorageUnavailableError,
    ValidationError,
    YostError,
)


class TestMapYostError:
    def test_invalid_combination_is_422_with_field(self):
        exc = map_yost_error(
            InvalidAttributeCombinationError("link missing", field="verification_link")
        )

        assert exc.status_code == 422
        assert exc.detail == {
            "code": "INVALID_ATTRIBUTE_COMBINATION",
            "message": "link missing",
            "field": "verification_link",
        }

    def test_validation_error_without_field(self):
        exc = map_yost_error(ValidationError("bad"))

        assert exc.status_code == 422
        assert "field" not in exc.detail

    def test_not_found_is_404(self):
        assert map_yost_error(NotFoundError("gone")).status_code == 404

    def test_unmapped_domain_error_is_400(self):
        assert map_yost_error(DomainError("nope")).status_code == 400

    def test_infrastructure_errors_are_503(self):
        for error in (
            StorageUnavailableError("db down"),
            ExternalServiceError("plaid down"),
            ConfigurationError("misconfigured"),
        ):
            assert map_yost_error(error).status_code == 503

    def test_unknown_error_is_500(self):
        exc = map_yost_error(YostError("???"))

        assert exc.status_code == 500
        assert exc.detail["code"] == "YostError"
