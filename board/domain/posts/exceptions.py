# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from board.shared.errors.base import DomainError


class PostNotFoundError(DomainError):
    default_code = "post_not_found"
    default_status = HTTPStatus.NOT_FOUND
    default_message = "Failed to find the post."

    def __init__(self, post_id: int) -> None:
        super().__init__(context={"post_id": post_id})


class CommentNotFoundError(DomainError):
    default_code = "comment_not_found"
    default_status = HTTPStatus.NOT_FOUND
    default_message = "Failed to find the comment."

    def __init__(self, post_id: int, comment_id: int) -> None:
        super().__init__(context={"post_id": post_id, "comment_id": comment_id})


class CommentsNotFoundError(DomainError):
    default_code = "comments_not_found"
    default_status = HTTPStatus.NOT_FOUND
    default_message = "Failed to find comments."

    def __init__(self, post_id: int) -> None:
        super().__init__(context={"post_id": post_id})
