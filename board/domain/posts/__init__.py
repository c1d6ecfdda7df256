# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Comment, NewComment, NewPost, Post
from .repositories import CommentRepository, PostRepository

__all__ = [
    "Comment",
    "CommentRepository",
    "NewComment",
    "NewPost",
    "Post",
    "PostRepository",
]
