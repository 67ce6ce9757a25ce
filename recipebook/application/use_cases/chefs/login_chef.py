# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from recipebook.domain.chefs.exceptions import InvalidCredentialsError
from recipebook.domain.chefs.repositories import ChefRepository, SessionRegistry
from recipebook.shared.logging import logger


class LoginChefUseCase:
    def __init__(self, *, chefs: ChefRepository, sessions: SessionRegistry) -> None:
        self._chefs = chefs
        self._sessions = sessions

    def execute(self, username: str, password: str) -> str:
        chef_id = self._chefs.verify(username, password)
        chef = self._chefs.find_by_id(chef_id) if chef_id is not None else None
        if chef is None:
            logger.info(f"auth.login: rejected username={username}")
            raise InvalidCredentialsError()
        return self._sessions.issue(chef.identity())
