# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from board.domain.ownership import Actor, OwnershipPolicy, ensure_owner
from board.domain.posts.entities import NewPost, Post
from board.domain.posts.exceptions import PostNotFoundError
from board.domain.posts.repositories import PostRepository
from board.shared.logging import logger


def _owner_id(actor: Actor) -> int:
    if actor.identity is None:
        raise ValueError("creating a post requires a resolved identity")
    return actor.identity.id


class PostService:
    def __init__(self, *, posts: PostRepository, policy: OwnershipPolicy) -> None:
        self._posts = posts
        self._policy = policy

    @property
    def policy(self) -> OwnershipPolicy:
        return self._policy

    def create(self, actor: Actor, *, title: str, content: str) -> Post:
        owner_id = _owner_id(actor)
        secret_hash = self._policy.seal(actor)
        post = self._posts.add(
            NewPost(
                owner_id=owner_id,
                title=title,
                content=content,
                secret_hash=secret_hash,
            )
        )
        logger.info(f"posts.create: ok (post_id={post.id}, owner_id={post.owner_id})")
        return post

    def list(self) -> list[Post]:
        return list(self._posts.list_newest_first())

    def get(self, post_id: int) -> Post:
        post = self._posts.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    def update(self, actor: Actor, post_id: int, *, title: str, content: str) -> Post:
        self._policy.require_credentials(actor)
        ensure_owner(self._policy, actor, self.get(post_id))

        updated = self._posts.update(post_id, title=title, content=content)
        if updated is None:
            # Deleted between the ownership check and the write
            raise PostNotFoundError(post_id)
        logger.info(f"posts.update: ok (post_id={post_id})")
        return updated

    def delete(self, actor: Actor, post_id: int) -> None:
        self._policy.require_credentials(actor)
        ensure_owner(self._policy, actor, self.get(post_id))

        if not self._posts.delete(post_id):
            raise PostNotFoundError(post_id)
        logger.info(f"posts.delete: ok (post_id={post_id})")
