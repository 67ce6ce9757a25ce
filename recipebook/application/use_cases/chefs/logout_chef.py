# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case for revoking session tokens."""

from __future__ import annotations

from recipebook.domain.chefs.repositories import SessionRegistry


class LogoutChefUseCase:
    def __init__(self, *, sessions: SessionRegistry) -> None:
        self._sessions = sessions

    def execute(self, token: str | None) -> None:
        if token:
            self._sessions.revoke(token)
