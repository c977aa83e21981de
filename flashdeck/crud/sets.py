from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from flashdeck.core.errors import NotFoundError
from flashdeck.models.flashcard import Flashcard
from flashdeck.models.set import Set, groups_sets
from flashdeck.schemas.set import SetCreate, SetUpdate


def personal_sets():
    """Sets that are not owned by a group."""
    return Set.id.not_in(select(groups_sets.c.set_id))


async def get_public(db: AsyncSession):
    q = (
        select(
            Set.id,
            Set.name,
            Set.description,
            Set.created_by,
            Set.date_created,
            func.count(Flashcard.id).label("num_flashcards"),
        )
        .outerjoin(Flashcard, Flashcard.set_id == Set.id)
        .where(Set.hidden.is_(False), personal_sets())
        .group_by(Set.id, Set.name, Set.description, Set.created_by, Set.date_created)
        .order_by(Set.id)
    )
    result = await db.execute(q)
    return [dict(row) for row in result.mappings().all()]


async def get(db: AsyncSession, set_id: int) -> Set:
    result = await db.execute(select(Set).where(Set.id == set_id))
    set_ = result.scalars().first()
    if set_ is None:
        raise NotFoundError(f"Set with id {set_id} not found.")
    return set_


async def get_with_flashcards(db: AsyncSession, set_id: int) -> Set:
    q = (
        select(Set)
        .where(Set.id == set_id)
        .options(selectinload(Set.flashcards))
        .execution_options(populate_existing=True)
    )
    result = await db.execute(q)
    set_ = result.scalars().first()
    if set_ is None:
        raise NotFoundError(f"Set with id {set_id} not found.")
    return set_


async def get_group_id(db: AsyncSession, set_id: int) -> int | None:
    result = await db.execute(select(groups_sets.c.group_id).where(groups_sets.c.set_id == set_id))
    return result.scalar_one_or_none()


async def add(db: AsyncSession, data: SetCreate, created_by: str) -> Set:
    new_set = Set(
        name=data.name,
        description=data.description,
        hidden=data.hidden,
        side_one_name=data.side_one_name,
        side_two_name=data.side_two_name,
        created_by=created_by,
    )
    db.add(new_set)
    await db.commit()
    await db.refresh(new_set)
    return new_set


async def update(db: AsyncSession, set_id: int, data: SetUpdate) -> Set:
    set_ = await get(db, set_id)
    set_.name = data.name
    set_.description = data.description
    set_.side_one_name = data.side_one_name
    set_.side_two_name = data.side_two_name
    db.add(set_)
    await db.commit()
    await db.refresh(set_)
    return set_


async def delete_set(db: AsyncSession, set_id: int) -> int:
    result = await db.execute(delete(Set).where(Set.id == set_id).returning(Set.id))
    deleted = result.scalar_one_or_none()
    if deleted is None:
        raise NotFoundError(f"No set with id {set_id} found")
    await db.commit()
    return deleted
