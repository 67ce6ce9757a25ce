# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, scoped_session, sessionmaker
from sqlalchemy.pool import StaticPool

from recipebook.shared.config import load_config
from recipebook.shared.config.settings import DatabaseConfig
from recipebook.shared.logging import logger

_config = load_config()


class Base(DeclarativeBase):
    pass


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def _unicode_lower(value: str | None) -> str | None:
    """SQLite's built-in lower() folds ASCII only."""

    return value.casefold() if isinstance(value, str) else value


def build_engine(database: DatabaseConfig) -> Engine:
    kwargs: dict[str, Any] = {"echo": False, "future": True, "pool_pre_ping": True}
    if database.url.startswith("sqlite"):
        kwargs["connect_args"] = {
            "check_same_thread": False,
            "timeout": int(database.pool_timeout),
        }
        if _is_memory_sqlite(database.url):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs.update(
            pool_size=database.pool_size,
            max_overflow=database.max_overflow,
            pool_timeout=database.pool_timeout,
        )

    engine = create_engine(database.url, **kwargs)

    if database.url.startswith("sqlite"):

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragmas(dbapi_conn, _):
            cur = dbapi_conn.cursor()
            try:
                cur.execute("PRAGMA foreign_keys=ON;")
            finally:
                cur.close()
            dbapi_conn.create_function("lower", 1, _unicode_lower, deterministic=True)

    return engine


ENGINE: Engine = build_engine(_config.database)


SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, autocommit=False, expire_on_commit=False)
)


def init_db(engine: Engine | None = None) -> None:
    from recipebook.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=engine or ENGINE)
    logger.info("Database schema ensured")
