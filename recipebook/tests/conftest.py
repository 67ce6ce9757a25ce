from __future__ import annotations

import os

os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENABLE_RATE_LIMIT"] = "0"
os.environ["SESSION_TTL_SECONDS"] = "3600"

from collections.abc import Callable, Iterator  # noqa: E402

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402
from sqlalchemy import Engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from recipebook.infrastructure.db import build_engine, init_db  # noqa: E402
from recipebook.shared.config.settings import DatabaseConfig  # noqa: E402


@pytest.fixture()
def engine() -> Iterator[Engine]:
    engine = build_engine(DatabaseConfig(url="sqlite://"))
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> Callable[[], Session]:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def container(engine: Engine, session_factory: Callable[[], Session]):
    from recipebook.infrastructure.container import Container

    container = Container(session_factory=session_factory, engine=engine)
    yield container
    container.shutdown()


@pytest.fixture()
def app(container) -> Flask:
    from recipebook.app import create_app

    return create_app(container)


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as client:
        yield client
