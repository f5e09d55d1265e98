"""
Fixtures pytest partagees pour les tests Filmorate.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec base SQLite temporaire
- Engine et session SQLModel sur une base initialisee (tables + referentiels)
- Store memoire vierge
- Client HTTP sur une application neuve, pour chaque backend (memoire et SQLite)
"""

from datetime import date
from pathlib import Path
from typing import Iterator

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient
from sqlalchemy import Engine
from sqlmodel import Session

from filmorate.config import Settings
from filmorate.container import Container
from filmorate.core.entities import Film, Genre, Mpa, User
from filmorate.infrastructure.memory import InMemoryStore
from filmorate.infrastructure.persistence.database import create_engine_for_url, init_db


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test : base SQLite et logs dans un repertoire temporaire."""
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        log_file=tmp_path / "logs" / "filmorate.log",
        log_level="DEBUG",
    )


@pytest.fixture
def engine(test_settings: Settings) -> Iterator[Engine]:
    """Engine sur une base temporaire, schema cree et referentiels charges."""
    engine = create_engine_for_url(test_settings.database_url)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def memory_container() -> Container:
    """Container dont la configuration selectionne le backend memoire."""
    container = Container()
    container.config.override(providers.Object(Settings(storage_backend="memory")))
    return container


@pytest.fixture
def sql_container(test_settings: Settings) -> Container:
    """Container dont la configuration pointe sur la base SQLite temporaire."""
    container = Container()
    container.config.override(
        providers.Object(
            Settings(storage_backend="sql", database_url=test_settings.database_url)
        )
    )
    return container


@pytest.fixture(params=["memory", "sql"])
def client(request) -> Iterator[TestClient]:
    """Client HTTP sur une application neuve, etat vierge, pour chaque backend."""
    from filmorate.web.app import create_app

    container = request.getfixturevalue(f"{request.param}_container")
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def make_film():
    """Fabrique de films valides, surchargeables champ par champ."""

    def _make(**overrides) -> Film:
        values = dict(
            name="Alien",
            description="Huit passagers, un intrus.",
            release_date=date(1979, 5, 25),
            duration=117,
            mpa=Mpa(id=4),
            genres=[Genre(id=4)],
        )
        values.update(overrides)
        return Film(**values)

    return _make


@pytest.fixture
def make_user():
    """Fabrique d'utilisateurs valides, email et login uniques par suffixe."""

    def _make(suffix: str = "1", **overrides) -> User:
        values = dict(
            email=f"user{suffix}@example.com",
            login=f"user{suffix}",
            name=f"User {suffix}",
            birthday=date(1990, 1, 1),
        )
        values.update(overrides)
        return User(**values)

    return _make
