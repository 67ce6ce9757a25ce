# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from recipebook.domain.chefs.entities import ChefIdentity
from recipebook.domain.chefs.repositories import SessionRegistry
from recipebook.shared.errors import UnauthenticatedError


class AuthenticateChefUseCase:
    """Turn a session token into the chef it was issued to."""

    def __init__(self, *, sessions: SessionRegistry) -> None:
        self._sessions = sessions

    def execute(self, token: str | None) -> ChefIdentity:
        chef = self._sessions.resolve(token)
        if chef is None:
            raise UnauthenticatedError()
        return chef
