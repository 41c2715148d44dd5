"""
===============================================================================
USER USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Contrato de resultados para los casos de uso de Users.

Códigos:
  - NOT_FOUND: el usuario no existe.
  - CONFLICT: email en uso, o usuario con reviews que no puede borrarse.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List
from uuid import UUID

from ....domain.entities import User, UserWithReviews

EMAIL_IN_USE_MESSAGE = "Email already in use"
USER_HAS_REVIEWS_MESSAGE = "User has reviews and cannot be removed"


class UserErrorCode(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"


@dataclass(frozen=True)
class UserError:
    code: UserErrorCode
    message: str
    resource: str | None = "User"
    resource_id: UUID | None = None


@dataclass
class UserResult:
    user: User | None = None
    error: UserError | None = None


@dataclass
class UserDetailResult:
    """Usuario + reviews (GET /users/{id})."""

    detail: UserWithReviews | None = None
    error: UserError | None = None


@dataclass
class UserListResult:
    users: List[User] = field(default_factory=list)
    error: UserError | None = None


@dataclass
class DeleteUserResult:
    deleted: bool
    error: UserError | None = None


def user_not_found(user_id: UUID) -> UserError:
    return UserError(
        code=UserErrorCode.NOT_FOUND,
        message=f"User with ID {user_id} not found",
        resource_id=user_id,
    )


def email_conflict() -> UserError:
    return UserError(code=UserErrorCode.CONFLICT, message=EMAIL_IN_USE_MESSAGE)
