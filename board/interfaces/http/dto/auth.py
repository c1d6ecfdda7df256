# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from board.shared.errors.validation_types import ValidationErrorType

NICKNAME_PATTERN = re.compile(r"[a-zA-Z0-9]+")
NICKNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 4


class SignupRequestDTO(BaseModel):
    nickname: str
    password: str
    confirm: str

    @field_validator("nickname")
    @classmethod
    def validate_nickname(cls, value: str) -> str:
        if len(value) < NICKNAME_MIN_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.NICKNAME_TOO_SHORT,
                "Nickname must be at least {min_length} characters long.",
                {"min_length": NICKNAME_MIN_LENGTH},
            )

        if not NICKNAME_PATTERN.fullmatch(value):
            raise PydanticCustomError(
                ValidationErrorType.NICKNAME_INVALID_CHARS,
                "Nickname must consist of letters (a-z, A-Z) and digits (0-9).",
                {"pattern": NICKNAME_PATTERN.pattern},
            )

        return value

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str, info: ValidationInfo) -> str:
        if len(value) < PASSWORD_MIN_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_TOO_SHORT,
                "Password must be at least {min_length} characters long.",
                {"min_length": PASSWORD_MIN_LENGTH},
            )

        # Missing when the nickname itself failed validation
        nickname = info.data.get("nickname")
        if nickname and nickname in value:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_CONTAINS_NICKNAME,
                "Password must not contain the nickname.",
                {},
            )

        return value

    @field_validator("confirm")
    @classmethod
    def validate_confirm(cls, value: str, info: ValidationInfo) -> str:
        password = info.data.get("password")
        if password is not None and value != password:
            raise PydanticCustomError(
                ValidationErrorType.CONFIRM_MISMATCH,
                "Password and confirmation do not match.",
                {},
            )
        return value


class LoginRequestDTO(BaseModel):
    nickname: str
    password: str

    @field_validator("nickname", "password")
    @classmethod
    def validate_present(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError(ValidationErrorType.BLANK, "Invalid request data.", {})
        return value


class MessageDTO(BaseModel):
    message: str


class TokenDTO(BaseModel):
    token: str


class ProfileDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(serialization_alias="userId")
    nickname: str
    created_at: datetime = Field(serialization_alias="createdAt")
