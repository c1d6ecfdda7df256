# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy.orm import Session, joinedload

from board.domain.posts.entities import Comment as DomainComment
from board.domain.posts.entities import NewComment
from board.domain.posts.repositories import CommentRepository
from board.infrastructure.db.models import Comment, as_utc
from board.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: Comment) -> DomainComment:
    return DomainComment(
        id=row.id,
        post_id=row.post_id,
        owner_id=row.user_id,
        nickname=row.user.nickname,
        comment=row.comment,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
        secret_hash=row.secret_hash,
    )


class SqlAlchemyCommentRepository(CommentRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def _load(self, session: Session, post_id: int, comment_id: int) -> Comment | None:
        return (
            session.query(Comment)
            .options(joinedload(Comment.user))
            .filter(Comment.id == comment_id, Comment.post_id == post_id)
            .first()
        )

    def add(self, comment: NewComment) -> DomainComment:
        with unit_of_work_scope(self._session_factory) as session:
            row = Comment(
                post_id=comment.post_id,
                user_id=comment.owner_id,
                comment=comment.comment,
                secret_hash=comment.secret_hash,
            )
            session.add(row)
            session.flush()
            return _to_domain(row)

    def list_for_post(self, post_id: int) -> Sequence[DomainComment]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(Comment)
                .options(joinedload(Comment.user))
                .filter(Comment.post_id == post_id)
                .order_by(Comment.created_at.desc(), Comment.id.desc())
                .all()
            )
            return [_to_domain(row) for row in rows]

    def find(self, post_id: int, comment_id: int) -> DomainComment | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = self._load(session, post_id, comment_id)
            return _to_domain(row) if row else None

    def update(self, post_id: int, comment_id: int, *, comment: str) -> DomainComment | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = self._load(session, post_id, comment_id)
            if row is None:
                return None
            row.comment = comment
            session.flush()
            return _to_domain(row)

    def delete(self, post_id: int, comment_id: int) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            deleted = (
                session.query(Comment)
                .filter(Comment.id == comment_id, Comment.post_id == post_id)
                .delete(synchronize_session=False)
            )
            return deleted > 0
