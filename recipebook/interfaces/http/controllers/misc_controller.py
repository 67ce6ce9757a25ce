# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

from recipebook.infrastructure.health import check_database
from recipebook.infrastructure.sessions.in_memory_registry import InMemorySessionRegistry
from recipebook.shared.logging import logger


class MiscController:
    def __init__(self, *, engine: Engine, sessions: InMemorySessionRegistry) -> None:
        self._engine = engine
        self._sessions = sessions

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            check_database(self._engine)
            status["database"] = "ok"
        except SQLAlchemyError as exc:
            logger.warning(f"health: database check failed: {type(exc).__name__}")
            status["ok"] = False
            status["database"] = "error"
        status["sessions"] = self._sessions.active_count()
        return jsonify(status)
