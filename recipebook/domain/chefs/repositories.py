# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Chef, ChefIdentity


class ChefRepository(Protocol):
    def find_by_username(self, username: str) -> Sequence[Chef]: ...
    def find_by_id(self, chef_id: int) -> Chef | None: ...
    def add(self, chef: Chef) -> Chef: ...
    def verify(self, username: str, password: str) -> int | None: ...


class SessionRegistry(Protocol):
    def issue(self, chef: ChefIdentity) -> str: ...
    def resolve(self, token: str | None) -> ChefIdentity | None: ...
    def revoke(self, token: str | None) -> None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
