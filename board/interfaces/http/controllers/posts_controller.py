# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from time import perf_counter

from flask import Blueprint, Response, jsonify, request

from board.application.services.post_service import PostService
from board.domain.ownership import Actor
from board.infrastructure.auth import auth_required, current_identity
from board.interfaces.http.dto.posts import (
    OwnerSecretDTO,
    PostDetailDTO,
    PostSummaryDTO,
    PostWriteDTO,
)
from board.shared.errors.validation import unwrap_or_raise, validate_payload
from board.shared.logging import logger


def _message(text: str) -> Response:
    return jsonify({"message": text})


class PostsController:
    def __init__(self, *, posts: PostService, api_prefix: str = "/api") -> None:
        self._posts = posts
        self._api_prefix = api_prefix

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("posts", __name__, url_prefix=self._api_prefix or None)
        bp.add_url_rule("/posts", view_func=self.list_posts, methods=["GET"])
        bp.add_url_rule("/posts", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/posts/<int:post_id>", view_func=self.detail, methods=["GET"])
        bp.add_url_rule("/posts/<int:post_id>", view_func=self.update, methods=["PUT"])
        bp.add_url_rule("/posts/<int:post_id>", view_func=self.delete, methods=["DELETE"])
        return bp

    def list_posts(self):
        t0 = perf_counter()
        items = [
            PostSummaryDTO.from_post(post).model_dump(mode="json", by_alias=True)
            for post in self._posts.list()
        ]
        dt = (perf_counter() - t0) * 1000
        logger.info(f"posts.list: ok (n={len(items)}, dt_ms={dt:.0f})")
        return jsonify({"data": items})

    def detail(self, post_id: int):
        post = self._posts.get(post_id)
        return jsonify({"data": PostDetailDTO.from_post(post).model_dump(mode="json", by_alias=True)})

    @auth_required
    def create(self):
        dto = unwrap_or_raise(validate_payload(PostWriteDTO, request.get_json(silent=True)))
        actor = Actor(identity=current_identity(), secret=dto.password)
        self._posts.create(actor, title=dto.title, content=dto.content)
        return _message("Post created."), HTTPStatus.CREATED

    @auth_required
    def update(self, post_id: int):
        dto = unwrap_or_raise(validate_payload(PostWriteDTO, request.get_json(silent=True)))
        actor = Actor(identity=current_identity(), secret=dto.password)
        self._posts.update(actor, post_id, title=dto.title, content=dto.content)
        return _message("Post updated."), HTTPStatus.OK

    @auth_required
    def delete(self, post_id: int):
        dto = unwrap_or_raise(validate_payload(OwnerSecretDTO, request.get_json(silent=True)))
        actor = Actor(identity=current_identity(), secret=dto.password)
        self._posts.delete(actor, post_id)
        return _message("Post deleted."), HTTPStatus.OK
