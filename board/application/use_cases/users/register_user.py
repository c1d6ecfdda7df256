# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from board.domain.users.entities import Identity
from board.domain.users.exceptions import NicknameTakenError
from board.domain.users.repositories import PasswordHasher, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, nickname: str, password: str) -> Identity:
        existing = self._users.find_by_nickname(nickname)
        if existing:
            raise NicknameTakenError(context={"nickname": nickname})
        hashed = self._password_hasher.hash(password)
        identity = Identity(
            id=0,
            nickname=nickname,
            password_hash=hashed,
            created_at=datetime.now(UTC),
        )
        return self._users.add(identity)
