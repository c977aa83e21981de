import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from flashdeck.core.errors import BadRequestError, NotFoundError
from flashdeck.core.security import hash_password
from flashdeck.crud import groups, sets
from flashdeck.models.group import Group, Membership
from flashdeck.models.set import Set
from flashdeck.models.user import User
from flashdeck.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


async def get_all(db: AsyncSession):
    result = await db.execute(select(User).order_by(User.username))
    return result.scalars().all()


async def get(db: AsyncSession, username: str) -> User:
    result = await db.execute(select(User).where(User.username == username))
    user = result.scalars().first()
    if user is None:
        raise NotFoundError(f"No user with username {username}")
    return user


async def register(db: AsyncSession, data: UserCreate) -> User:
    existing = await db.execute(select(User.username).where(User.username == data.username))
    if existing.scalar_one_or_none() is not None:
        raise BadRequestError(f"Duplicate username: {data.username}")
    new_user = User(
        username=data.username,
        password=hash_password(data.password),
        first_name=data.first_name,
        email=data.email,
    )
    db.add(new_user)
    await db.commit()
    await db.refresh(new_user)
    return new_user


async def update(db: AsyncSession, username: str, data: UserUpdate) -> User:
    user = await get(db, username)
    user.first_name = data.first_name
    user.email = data.email
    user.profile_picture = data.profile_picture
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


async def get_groups(db: AsyncSession, username: str):
    await get(db, username)
    q = (
        select(Group)
        .join(Membership, Membership.group_id == Group.id)
        .where(Membership.member_username == username)
        .order_by(Group.id)
    )
    result = await db.execute(q)
    return result.scalars().all()


async def get_sets(db: AsyncSession, username: str, include_hidden: bool = True):
    """Personal sets a user created. Group sets are listed under their group."""
    await get(db, username)
    q = select(Set).where(Set.created_by == username, sets.personal_sets()).order_by(Set.id)
    if not include_hidden:
        q = q.where(Set.hidden.is_(False))
    result = await db.execute(q)
    return result.scalars().all()


async def get_detail(db: AsyncSession, username: str, include_private: bool) -> dict:
    user = await get(db, username)
    return {
        "username": user.username,
        "first_name": user.first_name,
        "email": user.email if include_private else None,
        "profile_picture": user.profile_picture,
        "account_created": user.account_created,
        "groups": await get_groups(db, username),
        "sets": await get_sets(db, username, include_hidden=include_private),
    }


async def is_member(db: AsyncSession, group_id: int, username: str) -> bool:
    q = select(Membership.group_id).where(
        Membership.group_id == group_id,
        Membership.member_username == username,
    )
    result = await db.execute(q)
    return result.scalar_one_or_none() is not None


async def join_group(db: AsyncSession, username: str, group_id: int) -> int:
    await get(db, username)
    await groups.get(db, group_id)
    if await is_member(db, group_id, username):
        raise BadRequestError(f"{username} is already a member of group {group_id}")
    db.add(Membership(group_id=group_id, member_username=username))
    await db.commit()
    logger.info("%s joined group %s", username, group_id)
    return group_id


async def leave_group(db: AsyncSession, username: str, group_id: int) -> int:
    group = await groups.get(db, group_id)
    if group.created_by == username:
        raise BadRequestError("You can't leave a group if you own it!")
    q = (
        delete(Membership)
        .where(Membership.group_id == group_id, Membership.member_username == username)
        .returning(Membership.group_id)
    )
    result = await db.execute(q)
    removed = result.scalar_one_or_none()
    if removed is None:
        raise NotFoundError(f"No user with username {username} in group {group_id}")
    await db.commit()
    logger.info("%s left group %s", username, group_id)
    return removed
