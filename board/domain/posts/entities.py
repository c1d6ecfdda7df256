# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Post:
    id: int
    owner_id: int
    nickname: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    # Only populated for secret-owned posts
    secret_hash: str | None = None


@dataclass(slots=True, frozen=True)
class Comment:
    id: int
    post_id: int
    owner_id: int
    nickname: str
    comment: str
    created_at: datetime
    updated_at: datetime
    secret_hash: str | None = None


@dataclass(slots=True, frozen=True)
class NewPost:
    owner_id: int
    title: str
    content: str
    secret_hash: str | None = None


@dataclass(slots=True, frozen=True)
class NewComment:
    post_id: int
    owner_id: int
    comment: str
    secret_hash: str | None = None
