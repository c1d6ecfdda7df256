# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Ownership policies guarding mutations of posts and comments.

Each resource type is bound to exactly one policy when the services are
wired. ``IdentityMatch`` compares the resolved session identity with the
owner stored on the resource; ``SecretMatch`` compares a password supplied
with the request against the hash stored on the resource and never looks at
the identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import ClassVar, Protocol

from board.shared.errors.base import DomainError, InvalidInputError

from .users.entities import Identity
from .users.repositories import PasswordHasher


class ForbiddenError(DomainError):
    # Kept at 401 for compatibility with existing clients
    default_code = "forbidden"
    default_status = HTTPStatus.UNAUTHORIZED
    default_message = "You are not allowed to modify this resource."


@dataclass(slots=True, frozen=True)
class Actor:
    identity: Identity | None = None
    secret: str | None = None


class OwnedResource(Protocol):
    @property
    def owner_id(self) -> int: ...

    @property
    def secret_hash(self) -> str | None: ...


class OwnershipPolicy(Protocol):
    mode: ClassVar[str]

    def require_credentials(self, actor: Actor) -> None: ...
    def seal(self, actor: Actor) -> str | None: ...
    def authorize(self, actor: Actor, resource: OwnedResource) -> bool: ...
    def denied(self) -> ForbiddenError: ...


class IdentityMatch:
    mode: ClassVar[str] = "identity"

    def require_credentials(self, actor: Actor) -> None:
        return None

    def seal(self, actor: Actor) -> str | None:
        return None

    def authorize(self, actor: Actor, resource: OwnedResource) -> bool:
        if actor.identity is None:
            return False
        return actor.identity.id == resource.owner_id

    def denied(self) -> ForbiddenError:
        return ForbiddenError()


class SecretMatch:
    mode: ClassVar[str] = "secret"

    def __init__(self, hasher: PasswordHasher) -> None:
        self._hasher = hasher

    def require_credentials(self, actor: Actor) -> None:
        if not actor.secret:
            raise InvalidInputError(
                "Please enter the password.",
                context={"fields": ["password"]},
            )

    def seal(self, actor: Actor) -> str | None:
        self.require_credentials(actor)
        return self._hasher.hash(actor.secret or "")

    def authorize(self, actor: Actor, resource: OwnedResource) -> bool:
        if not actor.secret or not resource.secret_hash:
            return False
        return self._hasher.verify(actor.secret, resource.secret_hash)

    def denied(self) -> ForbiddenError:
        return ForbiddenError(message="Password does not match.")


def ensure_owner(policy: OwnershipPolicy, actor: Actor, resource: OwnedResource) -> None:
    if not policy.authorize(actor, resource):
        raise policy.denied()


def build_policy(mode: str, hasher: PasswordHasher) -> OwnershipPolicy:
    if mode == IdentityMatch.mode:
        return IdentityMatch()
    if mode == SecretMatch.mode:
        return SecretMatch(hasher)
    raise ValueError(f"unknown ownership mode: {mode!r}")


__all__ = [
    "Actor",
    "ForbiddenError",
    "IdentityMatch",
    "OwnedResource",
    "OwnershipPolicy",
    "SecretMatch",
    "build_policy",
    "ensure_owner",
]
