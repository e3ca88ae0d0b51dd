"""Failure response helpers shared by routes, handlers and middleware."""

from __future__ import annotations

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from colprov.api.schemas import FailureResponse


def failure_json(status_code: int, message: str, code: str | None = None) -> JSONResponse:
    body = FailureResponse(error=message, code=code)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request body.")
    if loc:
        message = f"{loc}: {message}"
    return failure_json(400, message, code="invalid_payload")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return failure_json(500, str(exc) or "Failed to add column.", code="internal_error")
