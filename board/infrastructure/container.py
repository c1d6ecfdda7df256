# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from board.application.services.comment_service import CommentService
from board.application.services.password_hashing import WerkzeugPasswordHasher
from board.application.services.post_service import PostService
from board.application.services.session_resolver import SessionResolver
from board.application.services.token_codec import JwtTokenCodec
from board.application.use_cases.users.login_user import LoginUserUseCase
from board.application.use_cases.users.register_user import RegisterUserUseCase
from board.domain.ownership import OwnershipPolicy, build_policy
from board.infrastructure.db import build_engine, build_session_factory
from board.infrastructure.repositories import (
    SqlAlchemyCommentRepository,
    SqlAlchemyPostRepository,
    SqlAlchemyUserRepository,
)
from board.interfaces.http.controllers.auth_controller import AuthController
from board.interfaces.http.controllers.comments_controller import CommentsController
from board.interfaces.http.controllers.misc_controller import MiscController
from board.interfaces.http.controllers.posts_controller import PostsController
from board.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig, *, engine: Engine | None = None) -> None:
        self.config = config
        if engine is not None:
            self.__dict__["engine"] = engine

    @cached_property
    def engine(self) -> Engine:
        return build_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_codec(self) -> JwtTokenCodec:
        return JwtTokenCodec(
            self.config.secret_key,
            ttl_seconds=self.config.token.ttl_seconds,
            algorithm=self.config.token.algorithm,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def post_repository(self) -> SqlAlchemyPostRepository:
        return SqlAlchemyPostRepository(self.session_factory)

    @cached_property
    def comment_repository(self) -> SqlAlchemyCommentRepository:
        return SqlAlchemyCommentRepository(self.session_factory)

    @cached_property
    def session_resolver(self) -> SessionResolver:
        return SessionResolver(
            codec=self.token_codec,
            users=self.user_repository,
            scheme=self.config.token.scheme,
        )

    @cached_property
    def post_policy(self) -> OwnershipPolicy:
        return build_policy(self.config.ownership.posts, self.password_hasher)

    @cached_property
    def comment_policy(self) -> OwnershipPolicy:
        return build_policy(self.config.ownership.comments, self.password_hasher)

    @cached_property
    def post_service(self) -> PostService:
        return PostService(posts=self.post_repository, policy=self.post_policy)

    @cached_property
    def comment_service(self) -> CommentService:
        return CommentService(
            posts=self.post_repository,
            comments=self.comment_repository,
            policy=self.comment_policy,
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_codec,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            session_resolver=self.session_resolver,
            config=self.config,
        )

    @cached_property
    def posts_controller(self) -> PostsController:
        return PostsController(posts=self.post_service, api_prefix=self.config.api_prefix)

    @cached_property
    def comments_controller(self) -> CommentsController:
        return CommentsController(
            comments=self.comment_service,
            api_prefix=self.config.api_prefix,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self.engine, api_prefix=self.config.api_prefix)
