# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session_guard import (
    auth_cookie_name,
    auth_required,
    current_identity,
    install_session_resolver,
    read_credential,
)

__all__ = [
    "auth_cookie_name",
    "auth_required",
    "current_identity",
    "install_session_resolver",
    "read_credential",
]
