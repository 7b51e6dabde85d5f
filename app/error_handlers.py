import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.errors import StoreUnavailable, ValidationError

logger = logging.getLogger(__name__)


async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies and bad path parameters are client errors: 400, not 422."""
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


async def validation_error_handler(_: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": exc.errors})


async def store_unavailable_handler(_: Request, exc: StoreUnavailable) -> JSONResponse:
    logger.error("Request failed, %s", exc)
    return JSONResponse(status_code=503, content={"detail": str(exc)})


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(StoreUnavailable, store_unavailable_handler)
