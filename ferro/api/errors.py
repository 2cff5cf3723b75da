"""
Domain error to HTTP mapping.

ValidationError -> 400, AlreadyExists -> 409, NotFound -> 404,
InfraError -> 500. InfraError reasons are logged server-side and never
sent to the client.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ferro.domain.exceptions import (
    AlreadyExists,
    DomainError,
    InfraError,
    NotFound,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AlreadyExists: status.HTTP_409_CONFLICT,
    NotFound: status.HTTP_404_NOT_FOUND,
    InfraError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a DomainError raised by a use case into a JSON error response."""
    status_code = STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            "Infrastructure error on %s %s: %s", request.method, request.url.path, exc.reason
        )
        detail = "Internal server error"
    else:
        detail = exc.reason

    return JSONResponse(status_code=status_code, content={"detail": detail})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
