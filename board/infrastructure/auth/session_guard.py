# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import wraps
from typing import cast

from flask import Flask, current_app, g, jsonify, request

from board.application.services.session_resolver import SessionResolver
from board.domain.users.entities import Identity
from board.domain.users.exceptions import AuthenticationError
from board.shared.logging import logger

SESSION_RESOLVER_KEY = "board.session_resolver"
COOKIE_NAME_KEY = "AUTH_COOKIE_NAME"


def install_session_resolver(app: Flask, resolver: SessionResolver, *, cookie_name: str) -> None:
    app.extensions[SESSION_RESOLVER_KEY] = resolver
    app.config[COOKIE_NAME_KEY] = cookie_name


def session_resolver() -> SessionResolver:
    return cast(SessionResolver, current_app.extensions[SESSION_RESOLVER_KEY])


def auth_cookie_name() -> str:
    return cast(str, current_app.config.get(COOKIE_NAME_KEY, "authorization"))


def read_credential() -> str | None:
    header = request.headers.get("Authorization", "")
    if header:
        return header
    return request.cookies.get(auth_cookie_name())


def current_identity() -> Identity:
    """Return the identity attached by :func:`auth_required`."""
    return cast(Identity, g.identity)


def auth_required(f):
    @wraps(f)
    def inner(*a, **kw):
        try:
            identity = session_resolver().resolve(read_credential())
        except AuthenticationError as exc:
            logger.warning(
                f"Auth failed ({exc.code}) on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            response = jsonify(exc.to_dict())
            # Force the client to log in again
            response.delete_cookie(auth_cookie_name())
            return response, exc.status

        g.identity = identity
        g.user_id = identity.id
        logger.debug(f"Auth OK: user={identity.id} {request.method} {request.path}")
        return f(*a, **kw)

    return inner
