"""
USE CASE: Get User

Devuelve el usuario junto a sus reviews (más recientes primero).
"""

from __future__ import annotations

from uuid import UUID

from ....domain.entities import UserWithReviews
from ....domain.repositories import ReviewRepository, UserRepository
from .user_results import UserDetailResult, user_not_found


class GetUserUseCase:
    def __init__(
        self,
        user_repository: UserRepository,
        review_repository: ReviewRepository,
    ) -> None:
        self._users = user_repository
        self._reviews = review_repository

    def execute(self, user_id: UUID) -> UserDetailResult:
        user = self._users.get_user(user_id)
        if user is None:
            return UserDetailResult(error=user_not_found(user_id))

        reviews = self._reviews.list_reviews_by_user(user_id)
        return UserDetailResult(detail=UserWithReviews(user=user, reviews=reviews))
