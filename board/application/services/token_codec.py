# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, stateless session tokens."""

from __future__ import annotations

import time
from collections.abc import Callable

import jwt

from board.domain.users.exceptions import (
    TokenExpiredError,
    TokenMalformedError,
    TokenSignatureError,
)
from board.domain.users.repositories import TokenCodec

SUBJECT_CLAIM = "userId"


class JwtTokenCodec(TokenCodec):
    """HMAC-signed JWT carrying the user id and issue time.

    ``ttl_seconds == 0`` issues tokens without an ``exp`` claim; they stay
    valid until the secret changes or the user disappears.
    """

    def __init__(
        self,
        secret: str,
        *,
        ttl_seconds: int = 0,
        algorithm: str = "HS256",
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret
        self._ttl = max(0, int(ttl_seconds))
        self._algorithm = algorithm
        self._clock = clock

    def issue(self, subject_id: int) -> str:
        now = int(self._clock())
        payload: dict[str, int] = {SUBJECT_CLAIM: int(subject_id), "iat": now}
        if self._ttl:
            payload["exp"] = now + self._ttl
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> int:
        required = ["iat", "exp"] if self._ttl else ["iat"]
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": required},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpiredError() from exc
        except jwt.InvalidSignatureError as exc:
            raise TokenSignatureError() from exc
        except jwt.InvalidTokenError as exc:
            raise TokenMalformedError(context={"reason": type(exc).__name__}) from exc

        subject = claims.get(SUBJECT_CLAIM)
        if isinstance(subject, bool) or not isinstance(subject, int):
            raise TokenMalformedError(context={"reason": "subject"})
        return subject


__all__ = ["JwtTokenCodec", "SUBJECT_CLAIM"]
