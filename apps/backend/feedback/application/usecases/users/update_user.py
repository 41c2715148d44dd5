"""
USE CASE: Update User

Aplica un patch parcial. Solo traduce señales del storage:
  - RecordNotFoundError  -> NOT_FOUND(User)
  - UniqueViolationError -> CONFLICT (email en uso)
"""

from __future__ import annotations

from uuid import UUID

from ....crosscutting.logger import logger
from ....domain.entities import UserPatch
from ....domain.repositories import UserRepository
from ....domain.storage_errors import RecordNotFoundError, UniqueViolationError
from .user_results import UserResult, email_conflict, user_not_found


class UpdateUserUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, user_id: UUID, patch: UserPatch) -> UserResult:
        try:
            user = self._users.update_user(user_id, fields=patch)
        except RecordNotFoundError:
            return UserResult(error=user_not_found(user_id))
        except UniqueViolationError:
            logger.warning(
                "user update rejected: email already in use",
                extra={"user_id": str(user_id)},
            )
            return UserResult(error=email_conflict())

        logger.info("user updated", extra={"user_id": str(user_id)})
        return UserResult(user=user)
