from __future__ import annotations

from collections.abc import Callable

import pytest
from flask import Flask
from flask.testing import FlaskClient

from board.app import create_app
from board.application.services.token_codec import JwtTokenCodec
from board.infrastructure.container import Container
from board.infrastructure.db.models import Comment, User
from board.shared.config import AppConfig

from .fakes import TEST_SECRET


def _signup(client: FlaskClient, nickname: str, password: str = "pass1") -> None:
    response = client.post(
        "/api/signup",
        json={"nickname": nickname, "password": password, "confirm": password},
    )
    assert response.status_code == 201, response.get_json()


def _login(client: FlaskClient, nickname: str, password: str = "pass1") -> dict[str, str]:
    response = client.post("/api/login", json={"nickname": nickname, "password": password})
    assert response.status_code == 200, response.get_json()
    return {"Authorization": f"Bearer {response.get_json()['token']}"}


def _register(client: FlaskClient, nickname: str) -> dict[str, str]:
    _signup(client, nickname)
    return _login(client, nickname)


def _create_post(client: FlaskClient, headers: dict[str, str], title: str = "Hi", **extra) -> int:
    response = client.post(
        "/api/posts", json={"title": title, "content": "Body", **extra}, headers=headers
    )
    assert response.status_code == 201, response.get_json()
    return client.get("/api/posts").get_json()["data"][0]["postId"]


@pytest.fixture()
def container(make_config: Callable[..., AppConfig]) -> Container:
    return Container(make_config())


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container.config, container)


def test_signup_login_create_update_flow(client: FlaskClient) -> None:
    dev = _register(client, "Dev")

    created = client.post("/api/posts", json={"title": "Hi", "content": "Body"}, headers=dev)
    assert created.status_code == 201
    assert created.get_json() == {"message": "Post created."}

    listing = client.get("/api/posts").get_json()["data"]
    assert listing[0]["title"] == "Hi"
    assert listing[0]["nickname"] == "Dev"
    assert "content" not in listing[0]
    post_id = listing[0]["postId"]

    updated = client.put(
        f"/api/posts/{post_id}", json={"title": "Hi2", "content": "Body2"}, headers=dev
    )
    assert updated.status_code == 200
    assert updated.get_json() == {"message": "Post updated."}

    eve = _register(client, "Eve")
    denied = client.put(
        f"/api/posts/{post_id}", json={"title": "X", "content": "Y"}, headers=eve
    )
    assert denied.status_code == 401
    assert denied.get_json()["error"] == "forbidden"

    detail = client.get(f"/api/posts/{post_id}").get_json()["data"]
    assert (detail["title"], detail["content"]) == ("Hi2", "Body2")


def test_signup_conflict_and_login_failures(client: FlaskClient) -> None:
    _signup(client, "Dev")

    duplicate = client.post(
        "/api/signup", json={"nickname": "Dev", "password": "pass2", "confirm": "pass2"}
    )
    unknown = client.post("/api/login", json={"nickname": "Nobody", "password": "pass1"})
    wrong = client.post("/api/login", json={"nickname": "Dev", "password": "nope"})

    assert duplicate.status_code == 409
    assert unknown.status_code == 412
    assert wrong.status_code == 400


def test_listing_is_newest_first_and_repeatable(client: FlaskClient) -> None:
    dev = _register(client, "Dev")
    for title in ("first", "second", "third"):
        _create_post(client, dev, title)

    first = client.get("/api/posts").get_json()
    second = client.get("/api/posts").get_json()

    assert [p["title"] for p in first["data"]] == ["third", "second", "first"]
    assert first == second


def test_missing_post_is_404_before_ownership(client: FlaskClient) -> None:
    dev = _register(client, "Dev")

    assert client.get("/api/posts/999").status_code == 404
    response = client.delete("/api/posts/999", headers=dev)
    assert response.status_code == 404
    assert response.get_json()["error"] == "post_not_found"


def test_blank_title_is_rejected(client: FlaskClient) -> None:
    dev = _register(client, "Dev")

    response = client.post("/api/posts", json={"title": "   ", "content": "Body"}, headers=dev)

    assert response.status_code == 400
    assert client.get("/api/posts").get_json()["data"] == []


def test_cookie_from_login_authenticates(client: FlaskClient) -> None:
    _signup(client, "Dev")
    client.post("/api/login", json={"nickname": "Dev", "password": "pass1"})

    me = client.get("/api/users/me")

    assert me.status_code == 200
    assert me.get_json()["data"]["nickname"] == "Dev"


def test_protected_routes_require_credentials(app: Flask) -> None:
    client = app.test_client()

    missing = client.post("/api/posts", json={"title": "Hi", "content": "Body"})
    basic = client.get("/api/users/me", headers={"Authorization": "Basic abc"})

    assert missing.status_code == 401
    assert missing.get_json()["error"] == "missing_credential"
    assert basic.get_json()["error"] == "unsupported_scheme"


def test_forged_and_expired_tokens(client: FlaskClient) -> None:
    _register(client, "Dev")
    forged = JwtTokenCodec("another-secret-key-with-enough-length-too").issue(1)
    expired = JwtTokenCodec(TEST_SECRET, ttl_seconds=5, clock=lambda: 1_000_000).issue(1)

    forged_resp = client.get("/api/users/me", headers={"Authorization": f"Bearer {forged}"})
    expired_resp = client.get("/api/users/me", headers={"Authorization": f"Bearer {expired}"})

    assert forged_resp.status_code == 401
    assert forged_resp.get_json()["error"] == "token_invalid_signature"
    assert expired_resp.status_code == 401
    assert expired_resp.get_json()["error"] == "token_expired"


def test_deleted_user_token_is_rejected(client: FlaskClient, container: Container) -> None:
    dev = _register(client, "Dev")
    with container.session_factory() as session:
        session.delete(session.query(User).filter_by(nickname="Dev").one())
        session.commit()

    response = client.get("/api/users/me", headers=dev)

    assert response.status_code == 401
    assert response.get_json()["error"] == "unknown_subject"


def test_comments_lifecycle(client: FlaskClient) -> None:
    dev = _register(client, "Dev")
    eve = _register(client, "Eve")
    post_id = _create_post(client, dev)

    assert client.get(f"/api/posts/{post_id}/comments").status_code == 404
    assert client.post("/api/posts/999/comments", json={"comment": "x"}, headers=dev).status_code == 404

    created = client.post(f"/api/posts/{post_id}/comments", json={"comment": "nice"}, headers=eve)
    assert created.status_code == 201
    comments = client.get(f"/api/posts/{post_id}/comments").get_json()["comments"]
    assert comments[0]["comment"] == "nice"
    assert comments[0]["nickname"] == "Eve"
    comment_id = comments[0]["commentId"]

    url = f"/api/posts/{post_id}/comments/{comment_id}"
    assert client.put(url, json={"comment": "hijack"}, headers=dev).status_code == 401
    assert client.put(url, json={"comment": "edited"}, headers=eve).status_code == 200
    assert client.delete(url, headers=eve).status_code == 200
    assert client.delete(url, headers=eve).status_code == 404


def test_deleting_post_removes_comments(client: FlaskClient, container: Container) -> None:
    dev = _register(client, "Dev")
    post_id = _create_post(client, dev)
    for text in ("one", "two"):
        client.post(f"/api/posts/{post_id}/comments", json={"comment": text}, headers=dev)

    response = client.delete(f"/api/posts/{post_id}", headers=dev)

    assert response.status_code == 200
    assert client.get(f"/api/posts/{post_id}").status_code == 404
    with container.session_factory() as session:
        assert session.query(Comment).count() == 0


def test_secret_owned_posts(make_config: Callable[..., AppConfig]) -> None:
    config = make_config(ownership__posts="secret")
    client = create_app(config, Container(config)).test_client()
    dev = _register(client, "Dev")
    eve = _register(client, "Eve")

    missing = client.post("/api/posts", json={"title": "Hi", "content": "Body"}, headers=dev)
    assert missing.status_code == 400

    post_id = _create_post(client, dev, password="pw1234")

    wrong = client.delete(f"/api/posts/{post_id}", json={"password": "nope"}, headers=dev)
    assert wrong.status_code == 401
    assert wrong.get_json()["message"] == "Password does not match."

    right = client.delete(f"/api/posts/{post_id}", json={"password": "pw1234"}, headers=eve)
    assert right.status_code == 200


def test_health_and_custom_prefix(make_config: Callable[..., AppConfig]) -> None:
    config = make_config(api_prefix="")
    client = create_app(config, Container(config)).test_client()

    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok"}


def test_request_id_is_echoed(client: FlaskClient) -> None:
    response = client.get("/api/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_nickname_with_trailing_newline_is_rejected(client: FlaskClient) -> None:
    _signup(client, "Dev")

    response = client.post(
        "/api/signup", json={"nickname": "Dev\n", "password": "pass1", "confirm": "pass1"}
    )

    assert response.status_code == 400
    assert response.get_json()["context"]["fields"] == ["nickname"]


def test_secret_owned_comments(make_config: Callable[..., AppConfig]) -> None:
    config = make_config(ownership__comments="secret")
    client = create_app(config, Container(config)).test_client()
    dev = _register(client, "Dev")
    eve = _register(client, "Eve")
    post_id = _create_post(client, dev)
    comments_url = f"/api/posts/{post_id}/comments"

    missing = client.post(comments_url, json={"comment": "nice"}, headers=dev)
    assert missing.status_code == 400

    created = client.post(comments_url, json={"comment": "nice", "password": "pw1234"}, headers=dev)
    assert created.status_code == 201
    comment_id = client.get(comments_url).get_json()["comments"][0]["commentId"]
    url = f"{comments_url}/{comment_id}"

    wrong_put = client.put(url, json={"comment": "hijack", "password": "nope"}, headers=dev)
    wrong_delete = client.delete(url, json={"password": "nope"}, headers=dev)
    assert (wrong_put.status_code, wrong_delete.status_code) == (401, 401)
    assert wrong_put.get_json()["error"] == "forbidden"
    assert client.get(comments_url).get_json()["comments"][0]["comment"] == "nice"

    edited = client.put(url, json={"comment": "edited", "password": "pw1234"}, headers=eve)
    assert edited.status_code == 200
    assert client.get(comments_url).get_json()["comments"][0]["comment"] == "edited"
    assert client.delete(url, json={"password": "pw1234"}, headers=eve).status_code == 200


def test_login_rate_limit_follows_app_config(make_config: Callable[..., AppConfig]) -> None:
    limited = make_config(security__enable_rate_limit=True, security__rate_limit_requests=2)
    client = create_app(limited, Container(limited)).test_client()
    _signup(client, "Dev")

    statuses = [
        client.post("/api/login", json={"nickname": "Dev", "password": "pass1"}).status_code
        for _ in range(3)
    ]

    assert statuses == [200, 200, 429]

    other = make_config(security__enable_rate_limit=True, security__rate_limit_requests=2)
    fresh = create_app(other, Container(other)).test_client()
    _signup(fresh, "Dev")
    assert fresh.post("/api/login", json={"nickname": "Dev", "password": "pass1"}).status_code == 200
