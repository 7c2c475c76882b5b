from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from notes_api.core.exceptions import StorePoisonedError
from notes_api.utils.logging import get_logger

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

logger = get_logger(__name__)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report a body that does not match the expected shape as a plain client error."""
    logger.info(
        "Rejected malformed request",
        extra={"path": request.url.path, "method": request.method, "errors": len(exc.errors())},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def store_poisoned_error_handler(request: Request, exc: StorePoisonedError) -> JSONResponse:
    logger.critical("Note store unavailable", extra={"path": request.url.path, "method": request.method})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StorePoisonedError, store_poisoned_error_handler)
