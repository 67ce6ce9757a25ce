# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from recipebook.domain.chefs.entities import Chef as DomainChef
from recipebook.domain.chefs.exceptions import ChefAlreadyExistsError
from recipebook.domain.chefs.repositories import ChefRepository, PasswordHasher
from recipebook.infrastructure.db.models import Chef
from recipebook.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: Chef) -> DomainChef:
    created_at = row.created_at or datetime.now(UTC)
    return DomainChef(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=created_at,
    )


class SqlAlchemyChefRepository(ChefRepository):
    def __init__(
        self,
        session_factory: Callable[[], Session],
        password_hasher: PasswordHasher,
    ) -> None:
        self._session_factory = session_factory
        self._password_hasher = password_hasher

    def find_by_username(self, username: str) -> Sequence[DomainChef]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(
                select(Chef).where(Chef.username == username).order_by(Chef.id.asc())
            ).all()
            return [_to_domain(row) for row in rows]

    def find_by_id(self, chef_id: int) -> DomainChef | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Chef, chef_id)
            return _to_domain(row) if row else None

    def add(self, chef: DomainChef) -> DomainChef:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = Chef(
                    username=chef.username,
                    password_hash=chef.password_hash,
                    created_at=chef.created_at,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            raise ChefAlreadyExistsError(context={"username": chef.username}) from exc

    def verify(self, username: str, password: str) -> int | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(select(Chef).where(Chef.username == username)).first()
            if row is None:
                return None
            chef_id, password_hash = row.id, row.password_hash
        if not self._password_hasher.verify(password, password_hash):
            return None
        return chef_id
