# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Process-wide session token registry.

Tokens are opaque random strings; validity is decided by lookup only, so the
registry is the single source of truth for who is logged in. State lives for
the life of the process and is dropped on ``clear()`` at shutdown.
"""

from __future__ import annotations

import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from threading import Lock

from recipebook.domain.chefs.entities import ChefIdentity, Session
from recipebook.domain.chefs.repositories import SessionRegistry
from recipebook.shared.logging import logger

TOKEN_BYTES = 48


def _utcnow() -> datetime:
    return datetime.now(UTC)


class InMemorySessionRegistry(SessionRegistry):
    def __init__(
        self,
        *,
        ttl: timedelta | None = None,
        clock: Callable[[], datetime] = _utcnow,
        token_factory: Callable[[], str] | None = None,
    ) -> None:
        self._ttl = ttl if ttl and ttl.total_seconds() > 0 else None
        self._clock = clock
        self._token_factory = token_factory or (lambda: secrets.token_urlsafe(TOKEN_BYTES))
        self._sessions: dict[str, Session] = {}
        self._lock = Lock()

    def issue(self, chef: ChefIdentity) -> str:
        now = self._clock()
        expires_at = now + self._ttl if self._ttl else None
        with self._lock:
            token = self._token_factory()
            while token in self._sessions:
                token = self._token_factory()
            self._sessions[token] = Session(
                token=token, chef=chef, created_at=now, expires_at=expires_at
            )
        logger.info(f"sessions.issue: chef_id={chef.id} tok={token[:8]}…")
        return token

    def resolve(self, token: str | None) -> ChefIdentity | None:
        if not token or not token.strip():
            return None
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return None
            if session.is_expired(self._clock()):
                del self._sessions[token]
                logger.info(f"sessions.resolve: expired chef_id={session.chef.id}")
                return None
            return session.chef

    def revoke(self, token: str | None) -> None:
        if not token:
            return
        with self._lock:
            session = self._sessions.pop(token, None)
        if session is not None:
            logger.info(f"sessions.revoke: chef_id={session.chef.id}")

    def purge_expired(self) -> int:
        now = self._clock()
        with self._lock:
            doomed = [tok for tok, s in self._sessions.items() if s.is_expired(now)]
            for tok in doomed:
                del self._sessions[tok]
        return len(doomed)

    def active_count(self) -> int:
        self.purge_expired()
        with self._lock:
            return len(self._sessions)

    def clear(self) -> None:
        with self._lock:
            count = len(self._sessions)
            self._sessions.clear()
        logger.info(f"sessions.clear: dropped {count} sessions")


__all__ = ["InMemorySessionRegistry", "TOKEN_BYTES"]
