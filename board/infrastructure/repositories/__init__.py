# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .comments import SqlAlchemyCommentRepository
from .posts import SqlAlchemyPostRepository
from .users import SqlAlchemyUserRepository

__all__ = [
    "SqlAlchemyCommentRepository",
    "SqlAlchemyPostRepository",
    "SqlAlchemyUserRepository",
]
