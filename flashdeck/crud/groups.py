import logging

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from flashdeck.core.database import atomic
from flashdeck.core.errors import NotFoundError
from flashdeck.models.group import DEFAULT_GROUP_PICTURE, Group, Membership
from flashdeck.models.post import Post
from flashdeck.models.set import Set, groups_sets
from flashdeck.models.user import User
from flashdeck.schemas.group import GroupCreate, GroupUpdate
from flashdeck.schemas.set import GroupSetCreate

logger = logging.getLogger(__name__)


async def get_all(db: AsyncSession):
    result = await db.execute(select(Group).order_by(Group.id))
    return result.scalars().all()


async def get(db: AsyncSession, group_id: int) -> Group:
    result = await db.execute(select(Group).where(Group.id == group_id))
    group = result.scalars().first()
    if group is None:
        raise NotFoundError(f"No group found with id {group_id}")
    return group


async def get_members(db: AsyncSession, group_id: int):
    await get(db, group_id)
    q = (
        select(User)
        .join(Membership, Membership.member_username == User.username)
        .where(Membership.group_id == group_id)
        .order_by(User.username)
    )
    result = await db.execute(q)
    return result.scalars().all()


async def get_sets(db: AsyncSession, group_id: int):
    q = (
        select(Set)
        .join(groups_sets, groups_sets.c.set_id == Set.id)
        .where(groups_sets.c.group_id == group_id)
        .order_by(Set.id)
    )
    result = await db.execute(q)
    return result.scalars().all()


async def get_posts(db: AsyncSession, group_id: int):
    """Top-level posts only, newest first."""
    q = (
        select(Post)
        .where(Post.group_id == group_id, Post.reply_to.is_(None))
        .order_by(Post.id.desc())
    )
    result = await db.execute(q)
    return result.scalars().all()


async def add(db: AsyncSession, data: GroupCreate, created_by: str) -> Group:
    """Create a group and make its creator the first member, as one transaction."""
    group = Group(
        name=data.name,
        description=data.description,
        group_picture=data.group_picture or DEFAULT_GROUP_PICTURE,
        created_by=created_by,
    )
    async with atomic(db):
        db.add(group)
        await db.flush()
        db.add(Membership(group_id=group.id, member_username=created_by))
    await db.refresh(group)
    logger.info("group %s created by %s", group.id, created_by)
    return group


async def update(db: AsyncSession, group_id: int, data: GroupUpdate) -> Group:
    group = await get(db, group_id)
    group.name = data.name
    group.description = data.description
    group.group_picture = data.group_picture or DEFAULT_GROUP_PICTURE
    db.add(group)
    await db.commit()
    await db.refresh(group)
    return group


async def delete_group(db: AsyncSession, group_id: int) -> int:
    """Delete a group together with the sets it owns; their flashcards go with them."""
    group_set_ids = select(groups_sets.c.set_id).where(groups_sets.c.group_id == group_id)
    async with atomic(db):
        await db.execute(
            delete(Set).where(Set.id.in_(group_set_ids)).execution_options(synchronize_session=False)
        )
        result = await db.execute(delete(Group).where(Group.id == group_id).returning(Group.id))
        deleted = result.scalar_one_or_none()
        if deleted is None:
            raise NotFoundError(f"No group found with id {group_id}")
    logger.info("group %s deleted", group_id)
    return deleted


async def add_set(db: AsyncSession, group_id: int, data: GroupSetCreate, created_by: str) -> Set:
    """Create a set owned by the group; the set row and its association commit together."""
    await get(db, group_id)
    new_set = Set(
        name=data.name,
        description=data.description,
        hidden=False,
        side_one_name=data.side_one_name,
        side_two_name=data.side_two_name,
        created_by=created_by,
    )
    async with atomic(db):
        db.add(new_set)
        await db.flush()
        await db.execute(insert(groups_sets).values(group_id=group_id, set_id=new_set.id))
    await db.refresh(new_set)
    return new_set
