"""
USE CASE: Delete User

Borra un usuario. La FK de reviews es RESTRICT: un usuario con reviews no se
puede borrar (CONFLICT), para no dejar agregados de score inconsistentes.
"""

from __future__ import annotations

from uuid import UUID

from ....crosscutting.logger import logger
from ....domain.repositories import UserRepository
from ....domain.storage_errors import ForeignKeyViolationError, RecordNotFoundError
from .user_results import (
    USER_HAS_REVIEWS_MESSAGE,
    DeleteUserResult,
    UserError,
    UserErrorCode,
    user_not_found,
)


class DeleteUserUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, user_id: UUID) -> DeleteUserResult:
        try:
            self._users.delete_user(user_id)
        except RecordNotFoundError:
            return DeleteUserResult(deleted=False, error=user_not_found(user_id))
        except ForeignKeyViolationError:
            logger.warning(
                "user delete rejected: user has reviews",
                extra={"user_id": str(user_id)},
            )
            return DeleteUserResult(
                deleted=False,
                error=UserError(
                    code=UserErrorCode.CONFLICT,
                    message=USER_HAS_REVIEWS_MESSAGE,
                    resource_id=user_id,
                ),
            )

        logger.info("user deleted", extra={"user_id": str(user_id)})
        return DeleteUserResult(deleted=True)
