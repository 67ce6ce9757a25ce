from __future__ import annotations

from collections.abc import Sequence

import pytest

from recipebook.application.use_cases.chefs.authenticate_chef import AuthenticateChefUseCase
from recipebook.application.use_cases.chefs.login_chef import LoginChefUseCase
from recipebook.application.use_cases.chefs.logout_chef import LogoutChefUseCase
from recipebook.application.use_cases.chefs.register_chef import RegisterChefUseCase
from recipebook.domain.chefs.entities import Chef, ChefIdentity
from recipebook.domain.chefs.exceptions import ChefAlreadyExistsError, InvalidCredentialsError
from recipebook.domain.chefs.repositories import ChefRepository, PasswordHasher
from recipebook.infrastructure.sessions.in_memory_registry import InMemorySessionRegistry
from recipebook.shared.errors import UnauthenticatedError


class InMemoryChefRepository(ChefRepository):
    def __init__(self, hasher: PasswordHasher) -> None:
        self._chefs: dict[int, Chef] = {}
        self._seq = 1
        self._hasher = hasher

    def find_by_username(self, username: str) -> Sequence[Chef]:
        return [chef for chef in self._chefs.values() if chef.username == username]

    def find_by_id(self, chef_id: int) -> Chef | None:
        return self._chefs.get(chef_id)

    def add(self, chef: Chef) -> Chef:
        new_chef = Chef(
            id=self._seq,
            username=chef.username,
            password_hash=chef.password_hash,
            created_at=chef.created_at,
        )
        self._seq += 1
        self._chefs[new_chef.id] = new_chef
        return new_chef

    def verify(self, username: str, password: str) -> int | None:
        for chef in self.find_by_username(username):
            if self._hasher.verify(password, chef.password_hash):
                return chef.id
        return None


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def chefs() -> InMemoryChefRepository:
    return InMemoryChefRepository(DeterministicHasher())


@pytest.fixture()
def sessions() -> InMemorySessionRegistry:
    return InMemorySessionRegistry()


def _register(chefs: InMemoryChefRepository, username: str, password: str) -> ChefIdentity:
    use_case = RegisterChefUseCase(chefs=chefs, password_hasher=DeterministicHasher())
    return use_case.execute(username, password)


def test_register_chef_success(chefs: InMemoryChefRepository) -> None:
    chef = _register(chefs, "remy", "ratatouille1")

    assert chef == ChefIdentity(id=1, username="remy")
    stored = chefs.find_by_id(1)
    assert stored is not None
    assert stored.password_hash == "hashed:ratatouille1"


def test_register_duplicate_username_conflicts(chefs: InMemoryChefRepository) -> None:
    _register(chefs, "remy", "ratatouille1")

    with pytest.raises(ChefAlreadyExistsError) as exc_info:
        _register(chefs, "remy", "different2")

    assert exc_info.value.status == 409
    assert len(chefs.find_by_username("remy")) == 1


def test_login_issues_resolvable_token(
    chefs: InMemoryChefRepository, sessions: InMemorySessionRegistry
) -> None:
    _register(chefs, "remy", "ratatouille1")
    login = LoginChefUseCase(chefs=chefs, sessions=sessions)

    token = login.execute("remy", "ratatouille1")

    assert sessions.resolve(token) == ChefIdentity(id=1, username="remy")


@pytest.mark.parametrize(("username", "password"), [("remy", "wrong"), ("ghost", "ratatouille1")])
def test_login_rejects_bad_credentials(
    chefs: InMemoryChefRepository,
    sessions: InMemorySessionRegistry,
    username: str,
    password: str,
) -> None:
    _register(chefs, "remy", "ratatouille1")
    login = LoginChefUseCase(chefs=chefs, sessions=sessions)

    with pytest.raises(InvalidCredentialsError):
        login.execute(username, password)

    assert sessions.active_count() == 0


def test_logout_revokes_token(
    chefs: InMemoryChefRepository, sessions: InMemorySessionRegistry
) -> None:
    _register(chefs, "remy", "ratatouille1")
    token = LoginChefUseCase(chefs=chefs, sessions=sessions).execute("remy", "ratatouille1")

    LogoutChefUseCase(sessions=sessions).execute(token)

    assert sessions.resolve(token) is None


def test_authenticate_requires_live_session(sessions: InMemorySessionRegistry) -> None:
    authenticate = AuthenticateChefUseCase(sessions=sessions)
    token = sessions.issue(ChefIdentity(id=9, username="linguini"))

    assert authenticate.execute(token).id == 9
    sessions.revoke(token)
    with pytest.raises(UnauthenticatedError):
        authenticate.execute(token)
    with pytest.raises(UnauthenticatedError):
        authenticate.execute(None)
