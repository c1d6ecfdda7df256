# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy.orm import Session, joinedload

from board.domain.posts.entities import NewPost
from board.domain.posts.entities import Post as DomainPost
from board.domain.posts.repositories import PostRepository
from board.infrastructure.db.models import Comment, Post, as_utc
from board.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: Post) -> DomainPost:
    return DomainPost(
        id=row.id,
        owner_id=row.user_id,
        nickname=row.user.nickname,
        title=row.title,
        content=row.content,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
        secret_hash=row.secret_hash,
    )


class SqlAlchemyPostRepository(PostRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def _load(self, session: Session, post_id: int) -> Post | None:
        return (
            session.query(Post)
            .options(joinedload(Post.user))
            .filter(Post.id == post_id)
            .first()
        )

    def add(self, post: NewPost) -> DomainPost:
        with unit_of_work_scope(self._session_factory) as session:
            row = Post(
                user_id=post.owner_id,
                title=post.title,
                content=post.content,
                secret_hash=post.secret_hash,
            )
            session.add(row)
            session.flush()
            return _to_domain(row)

    def list_newest_first(self) -> Sequence[DomainPost]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(Post)
                .options(joinedload(Post.user))
                .order_by(Post.created_at.desc(), Post.id.desc())
                .all()
            )
            return [_to_domain(row) for row in rows]

    def find_by_id(self, post_id: int) -> DomainPost | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = self._load(session, post_id)
            return _to_domain(row) if row else None

    def update(self, post_id: int, *, title: str, content: str) -> DomainPost | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = self._load(session, post_id)
            if row is None:
                return None
            row.title = title
            row.content = content
            session.flush()
            return _to_domain(row)

    def delete(self, post_id: int) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Post, post_id)
            if row is None:
                return False
            # Children go first so stores without ON DELETE CASCADE behave the same
            session.query(Comment).filter(Comment.post_id == post_id).delete(
                synchronize_session=False
            )
            session.delete(row)
            return True
