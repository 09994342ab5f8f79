"""Exception handlers translating service errors into JSON responses.

Every error body has a ``message`` plus the fields the error carries,
e.g. ``{"message": "Some ids already exist", "duplicates": [1000001]}``.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from idspace.services.exceptions import ConflictError, NotFoundError, ServiceError, ValidationError

logger = structlog.get_logger(__name__)

# Checked in order, first match wins
STATUS_CODES: list[tuple[type[ServiceError], int]] = [
    (ValidationError, 400),
    (NotFoundError, 404),
    (ConflictError, 409),
]


def status_code_for(exc: ServiceError) -> int:
    """HTTP status for a service error. Unmapped errors are server errors."""
    for error_type, status_code in STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return 500


async def service_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, ServiceError)
    status_code = status_code_for(exc)
    logger.info(
        "Request rejected",
        method=request.method,
        path=request.url.path,
        status_code=status_code,
        error=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({"message": exc.message, **exc.details}),
    )


async def request_validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Malformed bodies and parameters are client errors (400), not 422."""
    assert isinstance(exc, RequestValidationError)
    errors = [{"loc": list(error["loc"]), "msg": error["msg"]} for error in exc.errors()]
    logger.info("Malformed request", method=request.method, path=request.url.path, errors=errors)
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder({"message": "Malformed request", "errors": errors}),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
