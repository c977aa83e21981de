"""Route dependencies that run the access checks.

FastAPI resolves these before it reports body validation errors, so a request
is authenticated, then authorized, then validated.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from flashdeck.core import permissions
from flashdeck.core.database import get_db
from flashdeck.core.security import Identity, get_current_user
from flashdeck.crud import groups, posts


async def set_viewer(set_id: int, current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return await permissions.ensure_set_viewer(db, current_user, set_id)


async def set_editor(set_id: int, current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return await permissions.ensure_set_editor(db, current_user, set_id)


async def flashcard_viewer(flashcard_id: int, current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return await permissions.ensure_flashcard_viewer(db, current_user, flashcard_id)


async def flashcard_editor(flashcard_id: int, current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return await permissions.ensure_flashcard_editor(db, current_user, flashcard_id)


async def comment_author(comment_id: int, current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return await permissions.ensure_comment_author(db, current_user, comment_id)


async def group_member(group_id: int, current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return await permissions.ensure_group_member(db, current_user, group_id)


async def group_owner(group_id: int, current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return await permissions.ensure_group_owner(db, current_user, group_id)


async def group_set_member(
    group_id: int,
    set_id: int,
    current_user: Identity = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await groups.get(db, group_id)
    set_ = await permissions.ensure_group_set(db, group_id, set_id)
    await permissions.ensure_group_member(db, current_user, group_id)
    return set_


async def group_flashcard_member(
    group_id: int,
    flashcard_id: int,
    current_user: Identity = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await groups.get(db, group_id)
    card = await permissions.ensure_group_flashcard(db, group_id, flashcard_id)
    await permissions.ensure_group_member(db, current_user, group_id)
    return card


async def group_post_member(
    group_id: int,
    post_id: int,
    current_user: Identity = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await groups.get(db, group_id)
    post = await posts.get_in_group(db, group_id, post_id)
    await permissions.ensure_group_member(db, current_user, group_id)
    return post


async def post_author(
    group_id: int,
    post_id: int,
    current_user: Identity = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await permissions.ensure_post_author(db, current_user, group_id, post_id)


async def current_user_path(username: str, current_user: Identity = Depends(get_current_user)):
    permissions.ensure_current_user(current_user, username)
    return current_user
