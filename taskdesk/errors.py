import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Client-facing failure with a fixed status code and message."""

    status_code = 400
    message = "Bad request"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingFieldsError(ServiceError):
    message = "Email and password are required"


class UserExistsError(ServiceError):
    message = "User already exists"


class NoSuchUserError(ServiceError):
    message = "No such user"


class InvalidPasswordError(ServiceError):
    message = "Invalid password"


class PasswordTooLongError(ServiceError):
    message = "password too long: must be at most 72 bytes when UTF-8 encoded"


SERVER_ERROR_MESSAGE = "Server error"


async def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    # the offending input is not echoed back; it may not even be encodable
    errors = [{k: v for k, v in err.items() if k not in ("input", "ctx")} for err in exc.errors()]
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request body", "errors": jsonable_encoder(errors)},
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    # details go to the log only, the client gets an opaque message
    logger.error("Database error on %s: %s", request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": SERVER_ERROR_MESSAGE})


async def generic_exception_handler(request: Request, exc: Exception):
    # anything the driver raises without SQLAlchemy wrapping it
    logger.error("Unhandled error on %s: %s", request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": SERVER_ERROR_MESSAGE})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
