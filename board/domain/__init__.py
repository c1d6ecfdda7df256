# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .ownership import (
    Actor,
    ForbiddenError,
    IdentityMatch,
    OwnershipPolicy,
    SecretMatch,
    build_policy,
    ensure_owner,
)
from .posts import Comment, Post
from .users import Identity

__all__ = [
    "Actor",
    "Comment",
    "ForbiddenError",
    "Identity",
    "IdentityMatch",
    "OwnershipPolicy",
    "Post",
    "SecretMatch",
    "build_policy",
    "ensure_owner",
]
