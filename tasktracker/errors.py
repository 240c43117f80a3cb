import logging
from contextlib import contextmanager
from enum import Enum

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    INVALID_ID = "invalid_id"
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID_CREDENTIALS = "invalid_credentials"
    STORAGE_ERROR = "storage_error"
    INTERNAL_ERROR = "internal_error"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS = {
    ErrorCode.INVALID_ID: 400,
    ErrorCode.VALIDATION_ERROR: 422,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.CONFLICT: 400,
    ErrorCode.INVALID_CREDENTIALS: 401,
    ErrorCode.STORAGE_ERROR: 500,
    ErrorCode.INTERNAL_ERROR: 500,
}


class ServiceError(Exception):
    """A declined request. Rendered as a ``status: false`` envelope."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class StorageError(Exception):
    """Raised by the stores when the database call itself fails."""


def envelope(message: str, status: bool = True, **payload) -> dict:
    body = {"message": message, "status": status}
    body.update(payload)
    return body


def declined(code: ErrorCode, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=code.http_status,
        content=jsonable_encoder(envelope(message, status=False, code=code.value)),
    )


@contextmanager
def storage_guard(message: str):
    """Turn a StorageError raised inside the block into a declined request.

    The underlying detail goes to the log only.
    """
    try:
        yield
    except StorageError as exc:
        logger.error("%s: %s", message, exc)
        raise ServiceError(ErrorCode.STORAGE_ERROR, f"{message}, Internal server error") from exc


async def service_error_handler(request: Request, exc: ServiceError):
    logger.info("%s %s declined: %s (%s)", request.method, request.url.path, exc.message, exc.code.value)
    return declined(exc.code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", "Invalid request")
    else:
        message = "Invalid request"
    return declined(ErrorCode.VALIDATION_ERROR, message)


async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return declined(ErrorCode.INTERNAL_ERROR, "Internal server error")


def install_error_handlers(app: FastAPI):
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
