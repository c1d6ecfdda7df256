from __future__ import annotations

import pytest

from board.interfaces.http.dto.auth import LoginRequestDTO, SignupRequestDTO
from board.interfaces.http.dto.posts import CommentWriteDTO, PostWriteDTO
from board.shared.errors import InvalidInputError, unwrap_or_raise, validate_payload
from board.shared.errors.validation_types import ValidationErrorType
from board.shared.result import Err, Ok


def _signup(nickname: str, password: str, confirm: str | None = None) -> dict[str, str]:
    return {"nickname": nickname, "password": password, "confirm": confirm or password}


def test_valid_signup_is_ok() -> None:
    result = validate_payload(SignupRequestDTO, _signup("Dev", "pass1"))

    assert isinstance(result, Ok)
    assert result.value.nickname == "Dev"


@pytest.mark.parametrize(
    ("payload", "field", "error_type"),
    [
        (_signup("ab", "pass1"), "nickname", ValidationErrorType.NICKNAME_TOO_SHORT),
        (_signup("dev!", "pass1"), "nickname", ValidationErrorType.NICKNAME_INVALID_CHARS),
        (_signup("Dev\n", "pass1"), "nickname", ValidationErrorType.NICKNAME_INVALID_CHARS),
        (_signup("Dev", "abc"), "password", ValidationErrorType.PASSWORD_TOO_SHORT),
        (_signup("Dev", "myDevpw"), "password", ValidationErrorType.PASSWORD_CONTAINS_NICKNAME),
        (_signup("Dev", "pass1", "pass2"), "confirm", ValidationErrorType.CONFIRM_MISMATCH),
    ],
)
def test_signup_policy_violations(payload: dict[str, str], field: str, error_type: str) -> None:
    result = validate_payload(SignupRequestDTO, payload)

    assert isinstance(result, Err)
    assert result.fields == [field]
    assert result.violations[0].type == error_type


def test_nickname_containment_is_case_sensitive() -> None:
    assert isinstance(validate_payload(SignupRequestDTO, _signup("Dev", "mydevpw")), Ok)


def test_missing_fields_use_generic_message() -> None:
    result = validate_payload(SignupRequestDTO, {"nickname": "Dev"})

    assert isinstance(result, Err)
    assert result.fields == ["confirm", "password"]
    assert result.first_message == "Invalid request data."


def test_login_rejects_blank_fields() -> None:
    assert isinstance(validate_payload(LoginRequestDTO, {"nickname": "", "password": "x"}), Err)
    assert isinstance(validate_payload(LoginRequestDTO, None), Err)


def test_blank_post_and_comment_text() -> None:
    post = validate_payload(PostWriteDTO, {"title": "  ", "content": "Body"})
    comment = validate_payload(CommentWriteDTO, {"comment": ""})

    assert isinstance(post, Err) and post.fields == ["title"]
    assert isinstance(comment, Err) and comment.first_message == "Please enter comment content."


def test_unwrap_or_raise_builds_invalid_input() -> None:
    with pytest.raises(InvalidInputError) as exc_info:
        unwrap_or_raise(validate_payload(SignupRequestDTO, _signup("ab", "pass1")))

    error = exc_info.value
    assert error.status == 400
    assert error.message == "Nickname must be at least 3 characters long."
    assert error.context is not None
    assert error.context["fields"] == ["nickname"]
