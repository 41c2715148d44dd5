"""
Use Cases Layer (Business Operations)

Structure
---------
usecases/
├── reviews/   # Review lifecycle (create/list/get/update/delete + events)
└── users/     # User CRUD

Usage
-----
    from feedback.application.usecases import CreateReviewUseCase
"""

from .reviews import (
    CreateReviewInput,
    CreateReviewUseCase,
    DeleteReviewResult,
    DeleteReviewUseCase,
    GetReviewUseCase,
    ListReviewsUseCase,
    ReviewError,
    ReviewErrorCode,
    ReviewListResult,
    ReviewResult,
    UpdateReviewUseCase,
)
from .users import (
    CreateUserInput,
    CreateUserUseCase,
    DeleteUserResult,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    UserDetailResult,
    UserError,
    UserErrorCode,
    UserListResult,
    UserResult,
)

__all__ = [
    # Reviews
    "CreateReviewInput",
    "CreateReviewUseCase",
    "DeleteReviewResult",
    "DeleteReviewUseCase",
    "GetReviewUseCase",
    "ListReviewsUseCase",
    "ReviewError",
    "ReviewErrorCode",
    "ReviewListResult",
    "ReviewResult",
    "UpdateReviewUseCase",
    # Users
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
