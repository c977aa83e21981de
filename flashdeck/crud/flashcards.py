from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from flashdeck.core.errors import NotFoundError
from flashdeck.models.comment import Comment
from flashdeck.models.flashcard import Flashcard
from flashdeck.schemas.flashcard import FlashcardSides


async def get(db: AsyncSession, flashcard_id: int) -> Flashcard:
    result = await db.execute(select(Flashcard).where(Flashcard.id == flashcard_id))
    card = result.scalars().first()
    if card is None:
        raise NotFoundError(f"Flashcard with id {flashcard_id} not found")
    return card


async def add(db: AsyncSession, set_id: int, data: FlashcardSides) -> Flashcard:
    card = Flashcard(
        side_one_text=data.side_one_text,
        side_two_text=data.side_two_text,
        side_one_image_url=data.side_one_image_url,
        side_two_image_url=data.side_two_image_url,
        set_id=set_id,
    )
    db.add(card)
    await db.commit()
    await db.refresh(card)
    return card


async def update(db: AsyncSession, flashcard_id: int, data: FlashcardSides) -> Flashcard:
    card = await get(db, flashcard_id)
    card.side_one_text = data.side_one_text
    card.side_two_text = data.side_two_text
    card.side_one_image_url = data.side_one_image_url
    card.side_two_image_url = data.side_two_image_url
    db.add(card)
    await db.commit()
    await db.refresh(card)
    return card


async def delete_flashcard(db: AsyncSession, flashcard_id: int) -> int:
    result = await db.execute(delete(Flashcard).where(Flashcard.id == flashcard_id).returning(Flashcard.id))
    deleted = result.scalar_one_or_none()
    if deleted is None:
        raise NotFoundError(f"Flashcard with id {flashcard_id} not found")
    await db.commit()
    return deleted


async def get_comments(db: AsyncSession, flashcard_id: int):
    q = select(Comment).where(Comment.flashcard_id == flashcard_id).order_by(Comment.id)
    result = await db.execute(q)
    return result.scalars().all()
