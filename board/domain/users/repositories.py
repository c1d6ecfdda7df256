# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Identity


class UserRepository(Protocol):
    def find_by_nickname(self, nickname: str) -> Identity | None: ...
    def find_by_id(self, user_id: int) -> Identity | None: ...
    def add(self, identity: Identity) -> Identity: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenCodec(Protocol):
    def issue(self, subject_id: int) -> str: ...
    def verify(self, token: str) -> int: ...
