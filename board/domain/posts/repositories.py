# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Comment, NewComment, NewPost, Post


class PostRepository(Protocol):
    def add(self, post: NewPost) -> Post: ...
    def list_newest_first(self) -> Sequence[Post]: ...
    def find_by_id(self, post_id: int) -> Post | None: ...
    def update(self, post_id: int, *, title: str, content: str) -> Post | None: ...
    def delete(self, post_id: int) -> bool: ...


class CommentRepository(Protocol):
    def add(self, comment: NewComment) -> Comment: ...
    def list_for_post(self, post_id: int) -> Sequence[Comment]: ...
    def find(self, post_id: int, comment_id: int) -> Comment | None: ...
    def update(self, post_id: int, comment_id: int, *, comment: str) -> Comment | None: ...
    def delete(self, post_id: int, comment_id: int) -> bool: ...
