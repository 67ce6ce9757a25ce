# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime


@dataclass(slots=True, frozen=True)
class ChefIdentity:
    """Public view of a chef; safe to hand to callers."""

    id: int
    username: str


@dataclass(slots=True, frozen=True)
class Chef:

    id: int
    username: str
    password_hash: str
    created_at: datetime

    def identity(self) -> ChefIdentity:
        return ChefIdentity(id=self.id, username=self.username)


@dataclass(slots=True, frozen=True)
class Session:

    token: str
    chef: ChefIdentity
    created_at: datetime
    expires_at: datetime | None = None

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expires_at is None:
            return False
        return (now or datetime.now(UTC)) >= self.expires_at
