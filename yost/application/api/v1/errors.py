"""Centralized error transformation for API routes.

Maps YOST errors (domain and infrastructure) to HTTPException responses.
"""

from typing import Any

from fastapi import HTTPException

from yost.domain.shared.error import (
    DomainError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
    YostError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: 404,
    ValidationError: 422,
}


def map_yost_error(error: YostError) -> HTTPException:
    """Map a YOST error to an HTTPException.

    Args:
        error: The YOST error to map.

    Returns:
        HTTPException with appropriate status code and detail.
    """
    detail: dict[str, Any] = {
        "code": error.code,
        "message": error.message,
    }

    if isinstance(error, InfrastructureError):
        # Infrastructure errors → 503 Service Unavailable
        return HTTPException(status_code=503, detail=detail)

    if isinstance(error, DomainError):
        status_code = next(
            (
                status
                for error_type, status in DOMAIN_ERROR_STATUS_MAP.items()
                if isinstance(error, error_type)
            ),
            400,
        )
        if isinstance(error, ValidationError) and error.field is not None:
            detail["field"] = error.field
        return HTTPException(status_code=status_code, detail=detail)

    # Fallback for unknown YostError subclasses
    return HTTPException(status_code=500, detail=detail)
