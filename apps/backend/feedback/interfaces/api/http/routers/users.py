"""
===============================================================================
TARJETA CRC — feedback/interfaces/api/http/routers/users.py
===============================================================================

Class/Module:
    User Router

Responsibilities:
    - Exponer CRUD HTTP de Users (detalle incluye sus reviews).
    - Traducir UserError -> RFC7807 (404 / 409).

Collaborators:
    - feedback.application.usecases (users)
    - feedback.container (factories DI)
    - schemas.users (DTOs Pydantic)
===============================================================================
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from feedback.application.usecases import (
    CreateUserInput,
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from feedback.container import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_get_user_use_case,
    get_list_users_use_case,
    get_update_user_use_case,
)
from feedback.domain.entities import User, UserPatch

from ..error_mapping import raise_user_error
from ..schemas.base import MessageRes
from ..schemas.users import CreateUserReq, UpdateUserReq, UserDetailRes, UserRes
from .reviews import to_review_res

router = APIRouter(prefix="/users", tags=["users"])

USER_REMOVED_MESSAGE = "User removed successfully"


def _to_user_res(user: User) -> UserRes:
    return UserRes(
        id=user.id,
        name=user.name,
        email=user.email,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


@router.post("", response_model=UserRes, status_code=status.HTTP_201_CREATED)
def create_user(
    req: CreateUserReq,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
):
    result = use_case.execute(CreateUserInput(name=req.name, email=str(req.email)))
    if result.error is not None:
        raise_user_error(result.error)
    return _to_user_res(result.user)


@router.get("", response_model=list[UserRes])
def list_users(use_case: ListUsersUseCase = Depends(get_list_users_use_case)):
    return [_to_user_res(u) for u in use_case.execute().users]


@router.get("/{user_id}", response_model=UserDetailRes)
def get_user(
    user_id: UUID,
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
):
    result = use_case.execute(user_id)
    if result.error is not None:
        raise_user_error(result.error)

    user = result.detail.user
    return UserDetailRes(
        **_to_user_res(user).model_dump(),
        reviews=[to_review_res(r) for r in result.detail.reviews],
    )


@router.patch("/{user_id}", response_model=UserRes)
def update_user(
    user_id: UUID,
    req: UpdateUserReq,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
):
    patch = UserPatch(
        name=req.name, email=str(req.email) if req.email is not None else None
    )
    result = use_case.execute(user_id, patch)
    if result.error is not None:
        raise_user_error(result.error)
    return _to_user_res(result.user)


@router.delete("/{user_id}", response_model=MessageRes)
def delete_user(
    user_id: UUID,
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
):
    result = use_case.execute(user_id)
    if result.error is not None:
        raise_user_error(result.error)
    return MessageRes(message=USER_REMOVED_MESSAGE)
