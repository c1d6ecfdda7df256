# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from board.shared.errors.base import DomainError


class NicknameTakenError(DomainError):
    default_code = "nickname_taken"
    default_status = HTTPStatus.CONFLICT
    default_message = "Nickname is already taken."


class UnknownNicknameError(DomainError):
    default_code = "unknown_nickname"
    default_status = HTTPStatus.PRECONDITION_FAILED
    default_message = "Check your nickname or password."


class InvalidCredentialsError(DomainError):
    default_code = "invalid_credentials"
    default_status = HTTPStatus.BAD_REQUEST
    default_message = "Login failed."


class AuthenticationError(DomainError):
    """Any failure to resolve a session; always answered with 401."""

    default_code = "unauthorized"
    default_status = HTTPStatus.UNAUTHORIZED
    default_message = "Abnormal request."


class MissingCredentialError(AuthenticationError):
    default_code = "missing_credential"
    default_message = "Token does not exist."


class UnsupportedSchemeError(AuthenticationError):
    default_code = "unsupported_scheme"
    default_message = "Token type does not match."


class TokenMalformedError(AuthenticationError):
    default_code = "token_malformed"
    default_message = "Token is malformed."


class TokenSignatureError(AuthenticationError):
    default_code = "token_invalid_signature"
    default_message = "Token has been tampered with."


class TokenExpiredError(AuthenticationError):
    default_code = "token_expired"
    default_message = "Token has expired."


class UnknownSubjectError(AuthenticationError):
    default_code = "unknown_subject"
    default_message = "User does not exist."
