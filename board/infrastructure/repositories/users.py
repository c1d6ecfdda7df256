# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from board.domain.users.entities import Identity
from board.domain.users.exceptions import NicknameTakenError
from board.domain.users.repositories import UserRepository
from board.infrastructure.db.models import User, as_utc
from board.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: User) -> Identity:
    return Identity(
        id=row.id,
        nickname=row.nickname,
        password_hash=row.password_hash,
        created_at=as_utc(row.created_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_nickname(self, nickname: str) -> Identity | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(User).filter(User.nickname == nickname).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> Identity | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, identity: Identity) -> Identity:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    nickname=identity.nickname,
                    password_hash=identity.password_hash,
                    created_at=identity.created_at,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            # Lost a race against a concurrent signup with the same nickname
            raise NicknameTakenError(context={"nickname": identity.nickname}) from exc
