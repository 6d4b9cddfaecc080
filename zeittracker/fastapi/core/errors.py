"""
Error taxonomy and the JSON responses it maps to.

Validation and request errors are reported to the caller with a readable
message; storage errors are logged and reported as a generic failure.
"""

import logging
from typing import Any, Iterable, Mapping

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INVALID_ENTRY_MESSAGE = "Invalid data. Please check your input."
INVALID_REQUEST_MESSAGE = "Invalid request. Please check the parameters."
STORAGE_ERROR_MESSAGE = "The request could not be completed because of a storage error."

# Name of the endpoint that records clock entries
ENTRY_SUBMISSION_ROUTE = "create_time_entry"


class TimeClockError(Exception):
    """Base class for all application errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EntryValidationError(TimeClockError):
    """A submitted time entry payload is malformed or incomplete."""

    def __init__(self, details: str, message: str = INVALID_ENTRY_MESSAGE):
        super().__init__(message)
        self.details = details

    def __str__(self) -> str:
        return f"{self.message} {self.details}"


class InvalidRequestError(TimeClockError):
    """A request parameter could not be interpreted."""


class StorageError(TimeClockError):
    """The underlying store is unreachable or rejected the operation."""


class AdminExistsError(StorageError):
    """An admin with the same username is already stored."""


def describe_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """
    Describe the first violated field constraint.

    Args:
        errors: Error dicts as produced by pydantic's ``ValidationError.errors()``

    Returns:
        Message such as ``"latitude: Field required"``
    """
    for error in errors:
        # Request validation errors are prefixed with the request part
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query")]
        field = ".".join(location)
        message = error.get("msg", "Invalid value")
        return f"{field}: {message}" if field else message
    return "Invalid value"


async def entry_validation_error_handler(request: Request, exc: EntryValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": exc.message, "details": exc.details}
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    route = request.scope.get("route")
    is_entry_submission = getattr(route, "name", None) == ENTRY_SUBMISSION_ROUTE
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": INVALID_ENTRY_MESSAGE if is_entry_submission else INVALID_REQUEST_MESSAGE,
            "details": describe_validation_errors(exc.errors())
        }
    )


async def invalid_request_error_handler(request: Request, exc: InvalidRequestError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": exc.message}
    )


async def storage_error_handler(request: Request, exc: StorageError):
    logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": STORAGE_ERROR_MESSAGE}
    )


def setup_exception_handlers(app: FastAPI):
    app.add_exception_handler(EntryValidationError, entry_validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(InvalidRequestError, invalid_request_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
