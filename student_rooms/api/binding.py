# student_rooms/api/binding.py
"""JSON body binding that ignores Content-Type, used by every JSON route."""

from __future__ import annotations

from typing import Awaitable, Callable, Optional, Type, TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, TypeAdapter, ValidationError

M = TypeVar("M", bound=BaseModel)


def json_body(model: Type[M]) -> Callable[[Request], Awaitable[M]]:
    """
    Build a dependency that decodes the raw request body into ``model``.

    The body is parsed as JSON whatever the Content-Type header says. A
    top-level ``null`` binds to ``model()`` with every field defaulted.
    Anything that does not decode or validate is re-raised as a
    RequestValidationError, so it ends up as a 400 ``{"error": ...}``.

    Args:
        model: Request body model

    Returns:
        An async callable usable with ``Depends``
    """
    adapter = TypeAdapter(Optional[model])

    async def bind(request: Request) -> M:
        raw = await request.body()
        try:
            value = adapter.validate_json(raw)
        except ValidationError as exc:
            errors = [{**error, "loc": ("body", *error["loc"])} for error in exc.errors()]
            raise RequestValidationError(errors) from exc
        return model() if value is None else value

    return bind
