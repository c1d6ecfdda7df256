# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from board.shared.result import Err, FieldViolation, Ok, Result

from .base import InvalidInputError

ModelT = TypeVar("ModelT", bound=BaseModel)

DEFAULT_MESSAGE = "Invalid request data."


def format_pydantic_errors(exc: PydanticValidationError) -> tuple[FieldViolation, ...]:
    violations = []
    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)
        error_type = error.get("type", "value_error")
        # Built-in pydantic messages for missing keys are not user facing
        message = DEFAULT_MESSAGE if error_type in ("missing", "model_type") else error.get("msg")
        ctx = error.get("ctx")
        violations.append(
            FieldViolation(
                field=field_path or "unknown",
                type=error_type,
                message=message or DEFAULT_MESSAGE,
                ctx={k: v for k, v in ctx.items() if isinstance(v, (str, int, float, bool))}
                if ctx
                else None,
            )
        )
    return tuple(violations)


def validate_payload(model: type[ModelT], data: Any) -> Result[ModelT]:
    """Validate ``data`` against ``model`` without raising."""

    try:
        return Ok(model.model_validate(data if data is not None else {}))
    except PydanticValidationError as exc:
        return Err(format_pydantic_errors(exc))


def invalid_input(err: Err) -> InvalidInputError:
    context = {
        "fields": err.fields,
        "errors": [v.to_dict() for v in err.violations],
    }
    return InvalidInputError(err.first_message or DEFAULT_MESSAGE, context=context)


def unwrap_or_raise(result: Result[ModelT]) -> ModelT:
    if isinstance(result, Err):
        raise invalid_input(result)
    return result.value


__all__ = [
    "format_pydantic_errors",
    "invalid_input",
    "unwrap_or_raise",
    "validate_payload",
]
