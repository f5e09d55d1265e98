"""
Routes des utilisateurs et de leurs amities.
"""

import asyncio

from fastapi import APIRouter, Depends

from ...core.validation import ensure_valid, validate_user, validate_user_update
from ...services import UserService
from ..deps import get_user_service
from ..schemas import UserIn, UserOut, UserPatchIn

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=201, response_model=UserOut)
async def create_user(body: UserIn, service: UserService = Depends(get_user_service)):
    user = body.to_entity()
    ensure_valid(validate_user(user))
    added = await asyncio.to_thread(service.add_user, user)
    return UserOut.from_entity(added)


@router.put("", response_model=UserOut)
async def update_user(body: UserIn, service: UserService = Depends(get_user_service)):
    user = body.to_entity()
    ensure_valid(validate_user(user, require_id=True))
    updated = await asyncio.to_thread(service.update_user, user)
    return UserOut.from_entity(updated)


@router.patch("", response_model=UserOut)
async def patch_user(body: UserPatchIn, service: UserService = Depends(get_user_service)):
    update = body.to_update()
    ensure_valid(validate_user_update(update))
    updated = await asyncio.to_thread(service.patch_user, update)
    return UserOut.from_entity(updated)


@router.get("", response_model=list[UserOut])
async def list_users(service: UserService = Depends(get_user_service)):
    users = await asyncio.to_thread(service.get_all_users)
    return [UserOut.from_entity(user) for user in users]


@router.get("/{user_id}", response_model=UserOut)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    user = await asyncio.to_thread(service.find_user_by_id, user_id)
    return UserOut.from_entity(user)


@router.put("/{user_id}/friends/{friend_id}")
async def add_friend(
    user_id: int, friend_id: int, service: UserService = Depends(get_user_service)
):
    await asyncio.to_thread(service.add_friend, user_id, friend_id)


@router.delete("/{user_id}/friends/{friend_id}")
async def remove_friend(
    user_id: int, friend_id: int, service: UserService = Depends(get_user_service)
):
    await asyncio.to_thread(service.remove_friend, user_id, friend_id)


@router.get("/{user_id}/friends", response_model=list[UserOut])
async def list_friends(user_id: int, service: UserService = Depends(get_user_service)):
    friends = await asyncio.to_thread(service.get_friends, user_id)
    return [UserOut.from_entity(friend) for friend in friends]


@router.get("/{user_id}/friends/common/{other_id}", response_model=list[UserOut])
async def list_common_friends(
    user_id: int, other_id: int, service: UserService = Depends(get_user_service)
):
    friends = await asyncio.to_thread(service.get_common_friends, user_id, other_id)
    return [UserOut.from_entity(friend) for friend in friends]
