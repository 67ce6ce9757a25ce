from __future__ import annotations

from datetime import UTC, datetime

import pytest

from recipebook.application.services.password_hashing import WerkzeugPasswordHasher
from recipebook.domain.chefs.entities import Chef
from recipebook.domain.chefs.exceptions import ChefAlreadyExistsError
from recipebook.infrastructure.repositories.chefs.sqlalchemy_chef_repository import (
    SqlAlchemyChefRepository,
)


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")


@pytest.fixture()
def repo(session_factory, hasher: WerkzeugPasswordHasher) -> SqlAlchemyChefRepository:
    return SqlAlchemyChefRepository(session_factory, hasher)


def _chef(username: str, hasher: WerkzeugPasswordHasher, password: str = "Bouillabaisse1") -> Chef:
    return Chef(id=0, username=username, password_hash=hasher.hash(password), created_at=datetime.now(UTC))


def test_add_and_find(repo: SqlAlchemyChefRepository, hasher: WerkzeugPasswordHasher) -> None:
    added = repo.add(_chef("remy", hasher))

    assert added.id > 0
    assert repo.find_by_id(added.id).username == "remy"
    assert [c.id for c in repo.find_by_username("remy")] == [added.id]
    assert repo.find_by_username("ghost") == []


def test_add_duplicate_username_conflicts(
    repo: SqlAlchemyChefRepository, hasher: WerkzeugPasswordHasher
) -> None:
    repo.add(_chef("remy", hasher))

    with pytest.raises(ChefAlreadyExistsError):
        repo.add(_chef("remy", hasher))


def test_verify_returns_chef_id_on_match(
    repo: SqlAlchemyChefRepository, hasher: WerkzeugPasswordHasher
) -> None:
    added = repo.add(_chef("remy", hasher, "Bouillabaisse1"))

    assert repo.verify("remy", "Bouillabaisse1") == added.id
    assert repo.verify("remy", "wrong") is None
    assert repo.verify("ghost", "Bouillabaisse1") is None
