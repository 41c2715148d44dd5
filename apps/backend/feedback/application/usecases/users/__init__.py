"""
===============================================================================
USER USE CASES PACKAGE (Public API / Exports)
===============================================================================
"""

from .create_user import CreateUserInput, CreateUserUseCase
from .delete_user import DeleteUserUseCase
from .get_user import GetUserUseCase
from .list_users import ListUsersUseCase
from .update_user import UpdateUserUseCase
from .user_results import (
    DeleteUserResult,
    UserDetailResult,
    UserError,
    UserErrorCode,
    UserListResult,
    UserResult,
)

__all__ = [
    "CreateUserInput",
    "CreateUserUseCase",
    "DeleteUserResult",
    "DeleteUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
    "UserDetailResult",
    "UserError",
    "UserErrorCode",
    "UserListResult",
    "UserResult",
]
