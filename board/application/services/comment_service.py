# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from board.domain.ownership import Actor, OwnershipPolicy, ensure_owner
from board.domain.posts.entities import Comment, NewComment
from board.domain.posts.exceptions import (
    CommentNotFoundError,
    CommentsNotFoundError,
    PostNotFoundError,
)
from board.domain.posts.repositories import CommentRepository, PostRepository
from board.shared.logging import logger


class CommentService:
    def __init__(
        self,
        *,
        posts: PostRepository,
        comments: CommentRepository,
        policy: OwnershipPolicy,
    ) -> None:
        self._posts = posts
        self._comments = comments
        self._policy = policy

    @property
    def policy(self) -> OwnershipPolicy:
        return self._policy

    def create(self, actor: Actor, post_id: int, *, comment: str) -> Comment:
        if actor.identity is None:
            raise ValueError("creating a comment requires a resolved identity")
        self._policy.require_credentials(actor)
        if self._posts.find_by_id(post_id) is None:
            raise PostNotFoundError(post_id)
        secret_hash = self._policy.seal(actor)

        created = self._comments.add(
            NewComment(
                post_id=post_id,
                owner_id=actor.identity.id,
                comment=comment,
                secret_hash=secret_hash,
            )
        )
        logger.info(f"comments.create: ok (post_id={post_id}, comment_id={created.id})")
        return created

    def list_for_post(self, post_id: int) -> list[Comment]:
        comments = list(self._comments.list_for_post(post_id))
        if not comments:
            raise CommentsNotFoundError(post_id)
        return comments

    def get(self, post_id: int, comment_id: int) -> Comment:
        found = self._comments.find(post_id, comment_id)
        if found is None:
            raise CommentNotFoundError(post_id, comment_id)
        return found

    def update(self, actor: Actor, post_id: int, comment_id: int, *, comment: str) -> Comment:
        self._policy.require_credentials(actor)
        ensure_owner(self._policy, actor, self.get(post_id, comment_id))

        updated = self._comments.update(post_id, comment_id, comment=comment)
        if updated is None:
            raise CommentNotFoundError(post_id, comment_id)
        logger.info(f"comments.update: ok (post_id={post_id}, comment_id={comment_id})")
        return updated

    def delete(self, actor: Actor, post_id: int, comment_id: int) -> None:
        self._policy.require_credentials(actor)
        ensure_owner(self._policy, actor, self.get(post_id, comment_id))

        if not self._comments.delete(post_id, comment_id):
            raise CommentNotFoundError(post_id, comment_id)
        logger.info(f"comments.delete: ok (post_id={post_id}, comment_id={comment_id})")
