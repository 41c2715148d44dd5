"""
USE CASE: Create User

Persiste un usuario. La unicidad del email la garantiza el storage
(UniqueViolationError -> CONFLICT); no se hace pre-chequeo.
"""

from __future__ import annotations

from dataclasses import dataclass

from ....crosscutting.logger import logger
from ....domain.repositories import UserRepository
from ....domain.storage_errors import UniqueViolationError
from .user_results import UserResult, email_conflict


@dataclass(frozen=True)
class CreateUserInput:
    name: str
    email: str


class CreateUserUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, input_data: CreateUserInput) -> UserResult:
        try:
            user = self._users.create_user(
                name=input_data.name, email=input_data.email
            )
        except UniqueViolationError:
            logger.warning("user rejected: email already in use")
            return UserResult(error=email_conflict())

        logger.info("user created", extra={"user_id": str(user.id)})
        return UserResult(user=user)
