"""
Error types raised by the todo service and the handlers that render them.

Every error response carries an ``error`` message. Validation errors also
carry a ``detail`` list with one entry per offending field.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from .schemas import TITLE_REQUIRED


class TodoError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(TodoError):
    """Malformed request input, e.g. a missing or blank title."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, details: Optional[List[Dict[str, str]]] = None) -> None:
        super().__init__(message)
        self.details = details or []

    def to_response(self) -> Dict[str, Any]:
        body = super().to_response()
        if self.details:
            body["detail"] = self.details
        return body


class NotFoundError(TodoError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Todo not found") -> None:
        super().__init__(message)


class DatabaseError(TodoError):
    """Any failure reported by the database driver; the message is passed through."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def validation_error_from_request(exc: RequestValidationError) -> ValidationError:
    """
    Convert FastAPI's request validation failure into a ValidationError.

    The first error's message becomes the top-level ``error`` text. Messages
    raised by our own validators are used verbatim (pydantic prefixes them
    with "Value error, ").
    """
    details = []
    for e in exc.errors():
        error_type = e.get("type")
        parts = [p for p in e.get("loc", ()) if p != "body"]
        if error_type == "json_invalid":
            # loc carries the character offset of the decode failure
            parts = [p for p in parts if not isinstance(p, int)]
        loc = [str(part) for part in parts]
        message = str(e.get("msg", "Invalid value"))
        if error_type == "value_error" and message.startswith("Value error, "):
            message = message[len("Value error, "):]
        elif error_type == "missing" and not loc:
            # no body at all; the only required body field is the title
            message = TITLE_REQUIRED
        details.append(
            {
                "field": ".".join(loc),
                "message": message,
                "type": str(e.get("type", "")),
            }
        )

    if not details:
        return ValidationError("Invalid request")
    first = details[0]
    if first["type"] == "value_error" or not first["field"]:
        message = first["message"]
    else:
        message = f"{first['field']}: {first['message']}"
    return ValidationError(message, details)


# PUBLIC_INTERFACE
def register_error_handlers(app: FastAPI) -> None:
    """Register the JSON error handlers on the FastAPI app."""

    @app.exception_handler(TodoError)
    async def todo_error_handler(request: Request, exc: TodoError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("{} {} failed: {}", request.method, request.url.path, exc.message)
        else:
            logger.warning(
                "{} {} rejected ({}): {}", request.method, request.url.path, exc.status_code, exc.message
            )
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return await todo_error_handler(request, validation_error_from_request(exc))
