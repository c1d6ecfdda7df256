from __future__ import annotations

import os

# Keeps AppConfig() from pointing at an on-disk database or the dev secret
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-enough-length-for-hs256")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from collections.abc import Callable, Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from board.app import create_app
from board.infrastructure.container import Container
from board.shared.config import AppConfig

from .fakes import TEST_SECRET, DeterministicHasher, InMemoryUserRepository


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def make_config() -> Callable[..., AppConfig]:
    def factory(**overrides: object) -> AppConfig:
        config = AppConfig(SECRET_KEY=TEST_SECRET)  # type: ignore[call-arg]
        config.database.url = "sqlite://"
        config.security.enable_rate_limit = False
        for path, value in overrides.items():
            section, _, name = path.partition("__")
            target = getattr(config, section) if name else config
            setattr(target, name or section, value)
        return config

    return factory


@pytest.fixture()
def app(make_config: Callable[..., AppConfig]) -> Flask:
    config = make_config()
    return create_app(config, Container(config))


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as test_client:
        yield test_client
