# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from enum import StrEnum


class ValidationErrorType(StrEnum):
    BLANK = "blank"
    NICKNAME_TOO_SHORT = "nickname_too_short"
    NICKNAME_INVALID_CHARS = "nickname_invalid_chars"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_CONTAINS_NICKNAME = "password_contains_nickname"
    CONFIRM_MISMATCH = "confirm_mismatch"


__all__ = ["ValidationErrorType"]
