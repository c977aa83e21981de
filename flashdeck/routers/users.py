from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from flashdeck.core.database import get_db
from flashdeck.core.deps import current_user_path
from flashdeck.core.permissions import ensure_can_leave, is_current_user
from flashdeck.core.security import Identity, get_current_user
from flashdeck.crud import users
from flashdeck.schemas.user import (
    Joined,
    Removed,
    UpdatedUserEnvelope,
    UserEnvelope,
    UserGroupList,
    UserList,
    UserSetList,
    UserUpdate,
)

router = APIRouter()


@router.get("", response_model=UserList)
async def get_users(current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return {"users": await users.get_all(db)}


@router.get("/{username}", response_model=UserEnvelope, response_model_exclude_none=True)
async def get_user(username: str, current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    """Profile with groups and sets. Email and hidden sets only appear on your own profile."""
    own_profile = is_current_user(current_user, username)
    return {"user": await users.get_detail(db, username, include_private=own_profile)}


@router.patch("/{username}", response_model=UpdatedUserEnvelope, status_code=201, dependencies=[Depends(current_user_path)])
async def update_user(username: str, data: UserUpdate, db: AsyncSession = Depends(get_db)):
    return {"user": await users.update(db, username, data)}


@router.get("/{username}/sets", response_model=UserSetList)
async def get_user_sets(username: str, current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    include_hidden = is_current_user(current_user, username)
    return {"sets": await users.get_sets(db, username, include_hidden=include_hidden)}


@router.get("/{username}/groups", response_model=UserGroupList)
async def get_user_groups(username: str, current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return {"groups": await users.get_groups(db, username)}


@router.post("/{username}/groups/{group_id}", response_model=Joined, dependencies=[Depends(current_user_path)])
async def join_group(username: str, group_id: int, db: AsyncSession = Depends(get_db)):
    return {"joined": await users.join_group(db, username, group_id)}


@router.delete("/{username}/groups/{group_id}", response_model=Removed)
async def leave_group(
    username: str,
    group_id: int,
    current_user: Identity = Depends(current_user_path),
    db: AsyncSession = Depends(get_db),
):
    await ensure_can_leave(db, current_user, group_id)
    return {"removed": await users.leave_group(db, username, group_id)}
