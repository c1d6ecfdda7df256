# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, jsonify, request

from board.application.services.comment_service import CommentService
from board.domain.ownership import Actor
from board.infrastructure.auth import auth_required, current_identity
from board.interfaces.http.dto.posts import CommentDTO, CommentWriteDTO, OwnerSecretDTO
from board.shared.errors.validation import unwrap_or_raise, validate_payload
from board.shared.logging import logger


class CommentsController:
    def __init__(self, *, comments: CommentService, api_prefix: str = "/api") -> None:
        self._comments = comments
        self._api_prefix = api_prefix

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("comments", __name__, url_prefix=self._api_prefix or None)
        bp.add_url_rule(
            "/posts/<int:post_id>/comments",
            view_func=self.list_comments,
            methods=["GET"],
        )
        bp.add_url_rule(
            "/posts/<int:post_id>/comments",
            view_func=self.create,
            methods=["POST"],
        )
        bp.add_url_rule(
            "/posts/<int:post_id>/comments/<int:comment_id>",
            view_func=self.update,
            methods=["PUT"],
        )
        bp.add_url_rule(
            "/posts/<int:post_id>/comments/<int:comment_id>",
            view_func=self.delete,
            methods=["DELETE"],
        )
        return bp

    def list_comments(self, post_id: int):
        comments = self._comments.list_for_post(post_id)
        logger.info(f"comments.list: ok (post_id={post_id}, n={len(comments)})")
        return jsonify(
            {
                "comments": [
                    CommentDTO.from_comment(c).model_dump(mode="json", by_alias=True)
                    for c in comments
                ]
            }
        )

    @auth_required
    def create(self, post_id: int):
        dto = unwrap_or_raise(validate_payload(CommentWriteDTO, request.get_json(silent=True)))
        actor = Actor(identity=current_identity(), secret=dto.password)
        self._comments.create(actor, post_id, comment=dto.comment)
        return jsonify({"message": "Comment created."}), HTTPStatus.CREATED

    @auth_required
    def update(self, post_id: int, comment_id: int):
        dto = unwrap_or_raise(validate_payload(CommentWriteDTO, request.get_json(silent=True)))
        actor = Actor(identity=current_identity(), secret=dto.password)
        self._comments.update(actor, post_id, comment_id, comment=dto.comment)
        return jsonify({"message": "Comment updated."}), HTTPStatus.OK

    @auth_required
    def delete(self, post_id: int, comment_id: int):
        dto = unwrap_or_raise(validate_payload(OwnerSecretDTO, request.get_json(silent=True)))
        actor = Actor(identity=current_identity(), secret=dto.password)
        self._comments.delete(actor, post_id, comment_id)
        return jsonify({"message": "Comment deleted."}), HTTPStatus.OK
