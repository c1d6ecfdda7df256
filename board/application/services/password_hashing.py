# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Werkzeug-backed hashing for account passwords and per-resource secrets."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from board.domain.users.repositories import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    def __init__(self, *, method: str = "scrypt", salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self._method, salt_length=self._salt_length)

    def verify(self, password: str, hashed: str) -> bool:
        # Identity-owned rows store no hash
        if not hashed:
            return False
        return check_password_hash(hashed, password)


__all__ = ["WerkzeugPasswordHasher"]
