# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from board.domain.posts.entities import Comment, Post
from board.shared.errors.validation_types import ValidationErrorType


def _require_text(value: str, message: str) -> str:
    if not value or not value.strip():
        raise PydanticCustomError(ValidationErrorType.BLANK, message, {})
    return value


class PostWriteDTO(BaseModel):
    title: str
    content: str
    # Only consulted for secret-owned posts
    password: str | None = None

    @field_validator("title", "content")
    @classmethod
    def validate_text(cls, value: str) -> str:
        return _require_text(value, "Invalid request data.")


class CommentWriteDTO(BaseModel):
    comment: str
    password: str | None = None

    @field_validator("comment")
    @classmethod
    def validate_comment(cls, value: str) -> str:
        return _require_text(value, "Please enter comment content.")


class OwnerSecretDTO(BaseModel):
    password: str | None = None


class PostSummaryDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    post_id: int = Field(serialization_alias="postId")
    user_id: int = Field(serialization_alias="userId")
    nickname: str
    title: str
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    @classmethod
    def from_post(cls, post: Post) -> PostSummaryDTO:
        return cls(
            post_id=post.id,
            user_id=post.owner_id,
            nickname=post.nickname,
            title=post.title,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class PostDetailDTO(PostSummaryDTO):
    content: str

    @classmethod
    def from_post(cls, post: Post) -> PostDetailDTO:
        return cls(
            post_id=post.id,
            user_id=post.owner_id,
            nickname=post.nickname,
            title=post.title,
            content=post.content,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class CommentDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    comment_id: int = Field(serialization_alias="commentId")
    post_id: int = Field(serialization_alias="postId")
    user_id: int = Field(serialization_alias="userId")
    nickname: str
    comment: str
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    @classmethod
    def from_comment(cls, comment: Comment) -> CommentDTO:
        return cls(
            comment_id=comment.id,
            post_id=comment.post_id,
            user_id=comment.owner_id,
            nickname=comment.nickname,
            comment=comment.comment,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
