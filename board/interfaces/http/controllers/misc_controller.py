# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from board.infrastructure.health import check_database
from board.shared.logging import logger


class MiscController:
    def __init__(self, *, engine: Engine, api_prefix: str = "/api") -> None:
        self._engine = engine
        self._api_prefix = api_prefix

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__, url_prefix=self._api_prefix or None)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            check_database(self._engine)
            status["database"] = "ok"
        except SQLAlchemyError as exc:
            logger.error(f"health: database check failed ({type(exc).__name__})")
            status["ok"] = False
            status["database"] = "error"
        return jsonify(status)
