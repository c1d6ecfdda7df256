# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request

from board.application.services.session_resolver import SessionResolver
from board.application.use_cases.users.login_user import LoginUserUseCase
from board.application.use_cases.users.register_user import RegisterUserUseCase
from board.infrastructure.auth import auth_required, current_identity
from board.interfaces.http.dto.auth import (
    LoginRequestDTO,
    MessageDTO,
    ProfileDTO,
    SignupRequestDTO,
    TokenDTO,
)
from board.shared.config import AppConfig
from board.shared.errors.validation import unwrap_or_raise, validate_payload
from board.shared.logging import logger
from board.shared.middleware.rate_limit import rate_limit


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        session_resolver: SessionResolver,
        config: AppConfig,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._session_resolver = session_resolver
        self._config = config

    def _set_auth_cookie(self, response: Response, credential: str) -> None:
        ttl = self._config.token.ttl_seconds
        response.set_cookie(
            self._config.token.cookie_name,
            credential,
            httponly=True,
            samesite=self._config.security.cookie_samesite,
            secure=self._config.security.cookie_secure,
            max_age=ttl or None,
        )

    @rate_limit(limit=5, window_seconds=60.0)
    def signup(self) -> tuple[Response, int]:
        dto = unwrap_or_raise(validate_payload(SignupRequestDTO, request.get_json(silent=True)))

        identity = self._register_use_case.execute(dto.nickname, dto.password)

        logger.info(f"auth.signup: ok user_id={identity.id}")
        payload = MessageDTO(message="Sign-up succeeded.").model_dump()
        return jsonify(payload), HTTPStatus.CREATED

    @rate_limit()
    def login(self) -> tuple[Response, int]:
        dto = unwrap_or_raise(validate_payload(LoginRequestDTO, request.get_json(silent=True)))

        try:
            result = self._login_use_case.execute(dto.nickname, dto.password)
        except Exception:
            logger.warning(f"auth.login: failed nickname={dto.nickname}")
            raise

        credential = self._session_resolver.format_credential(result.token)
        response = jsonify(TokenDTO(token=result.token).model_dump())
        self._set_auth_cookie(response, credential)
        response.headers["Authorization"] = credential
        logger.info(f"auth.login: ok user_id={result.identity.id}")
        return response, HTTPStatus.OK

    def logout(self) -> tuple[Response, int]:
        response = jsonify(MessageDTO(message="Logged out.").model_dump())
        response.delete_cookie(self._config.token.cookie_name)
        logger.info("auth.logout: ok")
        return response, HTTPStatus.OK

    @auth_required
    def me(self) -> tuple[Response, int]:
        identity = current_identity()
        profile = ProfileDTO(
            user_id=identity.id,
            nickname=identity.nickname,
            created_at=identity.created_at,
        )
        return jsonify({"data": profile.model_dump(mode="json", by_alias=True)}), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix=self._config.api_prefix or None)
        bp.add_url_rule("/signup", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["DELETE"])
        bp.add_url_rule("/users/me", view_func=self.me, methods=["GET"])
        return bp
