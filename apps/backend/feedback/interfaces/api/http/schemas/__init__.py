"""DTOs HTTP (pydantic) por feature."""

from .base import MessageRes
from .reviews import CreateReviewReq, ReviewRes, UpdateReviewReq, UserSummaryRes
from .users import CreateUserReq, UpdateUserReq, UserDetailRes, UserRes

__all__ = [
    "CreateReviewReq",
    "CreateUserReq",
    "MessageRes",
    "ReviewRes",
    "UpdateReviewReq",
    "UpdateUserReq",
    "UserDetailRes",
    "UserRes",
    "UserSummaryRes",
]
