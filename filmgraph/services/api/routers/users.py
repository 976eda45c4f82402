# filmgraph/services/api/routers/users.py
from __future__ import annotations

from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, Path

from filmgraph.services.api.deps import get_user_service
from filmgraph.services.mappers import user as mapper
from filmgraph.services.schemas.users import UserCreate, UserRead, UserUpdate
from filmgraph.services.users import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserRead, status_code=HTTPStatus.CREATED)
def create_user(payload: UserCreate, svc: UserService = Depends(get_user_service)) -> UserRead:
    return mapper.to_read_schema(svc.create(mapper.to_domain_from_create(payload)))


@router.get("", response_model=List[UserRead])
def list_users(svc: UserService = Depends(get_user_service)) -> List[UserRead]:
    return [mapper.to_read_schema(u) for u in svc.list_all()]


@router.put("", response_model=UserRead)
def update_user(payload: UserUpdate, svc: UserService = Depends(get_user_service)) -> UserRead:
    return mapper.to_read_schema(svc.update(mapper.to_domain_from_update(payload)))


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int = Path(...), svc: UserService = Depends(get_user_service)) -> UserRead:
    return mapper.to_read_schema(svc.get(user_id))


# ---- friends ----

@router.put("/{user_id}/friends/{friend_id}", status_code=HTTPStatus.NO_CONTENT)
def add_friend(user_id: int, friend_id: int, svc: UserService = Depends(get_user_service)) -> None:
    svc.add_friend(user_id, friend_id)
    return None


@router.delete("/{user_id}/friends/{friend_id}", status_code=HTTPStatus.NO_CONTENT)
def remove_friend(user_id: int, friend_id: int, svc: UserService = Depends(get_user_service)) -> None:
    svc.remove_friend(user_id, friend_id)
    return None


@router.get("/{user_id}/friends", response_model=List[UserRead])
def list_friends(user_id: int, svc: UserService = Depends(get_user_service)) -> List[UserRead]:
    return [mapper.to_read_schema(u) for u in svc.friends(user_id)]


@router.get("/{user_id}/friends/common/{other_id}", response_model=List[UserRead])
def common_friends(user_id: int, other_id: int, svc: UserService = Depends(get_user_service)) -> List[UserRead]:
    return [mapper.to_read_schema(u) for u in svc.common_friends(user_id, other_id)]
