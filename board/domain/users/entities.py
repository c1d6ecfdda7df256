# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Identity:
    """A registered account as seen by the authentication layer."""

    id: int
    nickname: str
    password_hash: str
    created_at: datetime
