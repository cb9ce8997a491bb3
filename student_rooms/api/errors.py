# student_rooms/api/errors.py
"""Error handlers turning binding failures into 400 {"error": ...} responses."""

from __future__ import annotations

from typing import Any, Dict, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """
    Flatten pydantic/FastAPI validation errors into a single message.

    Each error becomes "<location>: <msg>", e.g. "body.name: Input should
    be a valid string". Decoder text is appended when the message lacks it.

    Args:
        errors: The list returned by RequestValidationError.errors()

    Returns:
        str: Errors joined with "; "
    """
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid request")
        ctx_error = (error.get("ctx") or {}).get("error")
        if ctx_error and str(ctx_error) not in message:
            message = f"{message} ({ctx_error})"
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "invalid request"


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exc_handler(request: Request, exc: RequestValidationError):  # type: ignore[override]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": format_validation_errors(exc.errors())},
        )
