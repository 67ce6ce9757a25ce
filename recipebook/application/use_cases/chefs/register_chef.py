# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from recipebook.domain.chefs.entities import Chef, ChefIdentity
from recipebook.domain.chefs.exceptions import ChefAlreadyExistsError
from recipebook.domain.chefs.repositories import ChefRepository, PasswordHasher


class RegisterChefUseCase:
    def __init__(
        self,
        *,
        chefs: ChefRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._chefs = chefs
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> ChefIdentity:
        if self._chefs.find_by_username(username):
            raise ChefAlreadyExistsError(context={"username": username})
        hashed = self._password_hasher.hash(password)
        chef = Chef(id=0, username=username, password_hash=hashed, created_at=datetime.now(UTC))
        persisted = self._chefs.add(chef)
        return persisted.identity()
