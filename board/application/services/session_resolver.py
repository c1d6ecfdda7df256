# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from board.domain.users.entities import Identity
from board.domain.users.exceptions import (
    MissingCredentialError,
    TokenMalformedError,
    UnknownSubjectError,
    UnsupportedSchemeError,
)
from board.domain.users.repositories import TokenCodec, UserRepository
from board.shared.logging import logger


class SessionResolver:
    """Turn a ``"<scheme> <token>"`` credential into a stored identity."""

    def __init__(
        self,
        *,
        codec: TokenCodec,
        users: UserRepository,
        scheme: str = "Bearer",
    ) -> None:
        self._codec = codec
        self._users = users
        self._scheme = scheme

    @property
    def scheme(self) -> str:
        return self._scheme

    def format_credential(self, token: str) -> str:
        return f"{self._scheme} {token}"

    def resolve(self, credential: str | None) -> Identity:
        if not credential or not credential.strip():
            raise MissingCredentialError()

        scheme, _, token = credential.strip().partition(" ")
        if scheme != self._scheme:
            raise UnsupportedSchemeError()
        token = token.strip()
        if not token:
            raise TokenMalformedError(context={"reason": "empty"})

        subject_id = self._codec.verify(token)

        # Covers accounts removed after the token was issued
        identity = self._users.find_by_id(subject_id)
        if identity is None:
            logger.warning(f"session.resolve: unknown subject user_id={subject_id}")
            raise UnknownSubjectError()

        logger.debug(f"session.resolve: ok user_id={identity.id}")
        return identity
