# tests/conftest.py
from __future__ import annotations

from datetime import date
from typing import Optional

import pytest
from starlette.testclient import TestClient

from filmgraph.common.settings import Settings
from filmgraph.domain.entities.film import Film
from filmgraph.domain.entities.user import User
from filmgraph.services.api.app import create_app
from filmgraph.services.core import build_core


def _make_film(title: str = "Alien", year: int = 1979, **kw) -> Film:
    release_date = kw.pop("release_date", date(year, 5, 25))
    return Film(title=title, release_date=release_date, **kw)


def _make_user(login: str = "ripley", email: Optional[str] = None, **kw) -> User:
    return User(email=email or f"{login}@nostromo.space", login=login, **kw)


@pytest.fixture()
def make_film():
    return _make_film


@pytest.fixture()
def make_user():
    return _make_user


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture()
def core(settings):
    """A fresh, fully wired core per test; nothing is shared between tests."""
    return build_core(settings)


@pytest.fixture()
def api_client(core):
    app = create_app(core=core)
    with TestClient(app) as client:
        yield client
