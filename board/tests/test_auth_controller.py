from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from board.application.services.session_resolver import SessionResolver
from board.application.services.token_codec import JwtTokenCodec
from board.application.use_cases.users.login_user import LoginResult, LoginUserUseCase
from board.application.use_cases.users.register_user import RegisterUserUseCase
from board.domain.users.entities import Identity
from board.domain.users.exceptions import UnknownNicknameError
from board.infrastructure.auth import install_session_resolver
from board.interfaces.http.controllers.auth_controller import AuthController
from board.shared.config import AppConfig
from board.shared.middleware.error_handler import configure_error_handling

from .fakes import TEST_SECRET, InMemoryUserRepository


def _identity(nickname: str = "Dev") -> Identity:
    return Identity(id=1, nickname=nickname, password_hash="hash", created_at=datetime.now(UTC))


@pytest.fixture()
def resolver(users: InMemoryUserRepository) -> SessionResolver:
    return SessionResolver(codec=JwtTokenCodec(TEST_SECRET), users=users)


@pytest.fixture()
def build_app(
    make_config: Callable[..., AppConfig], resolver: SessionResolver
) -> Callable[..., Flask]:
    def factory(*, register=None, login=None) -> Flask:
        config = make_config()
        app = Flask(__name__)
        configure_error_handling(app)
        install_session_resolver(app, resolver, cookie_name=config.token.cookie_name)
        controller = AuthController(
            register_use_case=cast(RegisterUserUseCase, register or MagicMock()),
            login_use_case=cast(LoginUserUseCase, login or MagicMock()),
            session_resolver=resolver,
            config=config,
        )
        app.register_blueprint(controller.as_blueprint())
        return app

    return factory


def test_signup_endpoint_returns_created(build_app: Callable[..., Flask]) -> None:
    register_called: dict[str, tuple[str, str]] = {}

    class StubRegister:
        def execute(self, nickname: str, password: str) -> Identity:
            register_called["args"] = (nickname, password)
            return _identity(nickname)

    app = build_app(register=StubRegister())

    with app.test_client() as client:
        response = client.post(
            "/api/signup", json={"nickname": "Dev", "password": "pass1", "confirm": "pass1"}
        )

    assert response.status_code == 201
    assert response.get_json() == {"message": "Sign-up succeeded."}
    assert register_called["args"] == ("Dev", "pass1")


def test_signup_invalid_payload_returns_400(build_app: Callable[..., Flask]) -> None:
    register = MagicMock()
    app = build_app(register=register)

    with app.test_client() as client:
        response = client.post(
            "/api/signup", json={"nickname": "Dev", "password": "pass1", "confirm": "nope"}
        )

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"] == "invalid_input"
    assert payload["message"] == "Password and confirmation do not match."
    assert payload["context"]["fields"] == ["confirm"]
    register.execute.assert_not_called()


def test_login_sets_cookie_and_header(build_app: Callable[..., Flask]) -> None:
    login = MagicMock()
    login.execute.return_value = LoginResult(identity=_identity(), token="token123")
    app = build_app(login=login)

    with app.test_client() as client:
        response = client.post("/api/login", json={"nickname": "Dev", "password": "pass1"})

    assert response.status_code == 200
    assert response.get_json() == {"token": "token123"}
    assert response.headers["Authorization"] == "Bearer token123"
    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("authorization=")
    assert "token123" in cookie
    assert "HttpOnly" in cookie


def test_login_unknown_nickname_returns_412(build_app: Callable[..., Flask]) -> None:
    login = MagicMock()
    login.execute.side_effect = UnknownNicknameError()
    app = build_app(login=login)

    with app.test_client() as client:
        response = client.post("/api/login", json={"nickname": "ghost", "password": "pass1"})

    assert response.status_code == 412
    assert response.get_json()["error"] == "unknown_nickname"


def test_me_without_credential_clears_cookie(build_app: Callable[..., Flask]) -> None:
    app = build_app()

    with app.test_client() as client:
        response = client.get("/api/users/me")

    assert response.status_code == 401
    assert response.get_json() == {
        "error": "missing_credential",
        "message": "Token does not exist.",
    }
    assert response.headers["Set-Cookie"].startswith("authorization=;")


def test_logout_clears_cookie(build_app: Callable[..., Flask]) -> None:
    app = build_app()

    with app.test_client() as client:
        response = client.delete("/api/logout")

    assert response.status_code == 200
    assert "authorization=;" in response.headers["Set-Cookie"]
