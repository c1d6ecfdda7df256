# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Tagged result values produced by declarative validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class FieldViolation:
    field: str
    type: str
    message: str
    ctx: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"field": self.field, "type": self.type}
        if self.ctx:
            payload["ctx"] = dict(self.ctx)
        return payload


@dataclass(slots=True, frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(slots=True, frozen=True)
class Err:
    violations: tuple[FieldViolation, ...] = field(default_factory=tuple)

    @property
    def fields(self) -> list[str]:
        return sorted({v.field for v in self.violations})

    @property
    def first_message(self) -> str | None:
        if not self.violations:
            return None
        return self.violations[0].message


Result = Ok[T] | Err


__all__ = ["Err", "FieldViolation", "Ok", "Result"]
