# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from board.domain.users.entities import Identity
from board.domain.users.exceptions import InvalidCredentialsError, UnknownNicknameError
from board.domain.users.repositories import PasswordHasher, TokenCodec, UserRepository


@dataclass(slots=True, frozen=True)
class LoginResult:
    identity: Identity
    token: str


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenCodec,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, nickname: str, password: str) -> LoginResult:
        identity = self._users.find_by_nickname(nickname)
        if identity is None:
            raise UnknownNicknameError()

        if not self._password_hasher.verify(password, identity.password_hash):
            raise InvalidCredentialsError()

        return LoginResult(identity=identity, token=self._tokens.issue(identity.id))
