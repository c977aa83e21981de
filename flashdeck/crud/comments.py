from sqlalchemy import delete, select, update as sql_update
from sqlalchemy.ext.asyncio import AsyncSession

from flashdeck.core.errors import NotFoundError
from flashdeck.models.comment import Comment


async def get(db: AsyncSession, comment_id: int) -> Comment:
    result = await db.execute(select(Comment).where(Comment.id == comment_id))
    comment = result.scalars().first()
    if comment is None:
        raise NotFoundError(f"No comment with id {comment_id} found")
    return comment


async def add(db: AsyncSession, flashcard_id: int, text: str, posted_by: str) -> Comment:
    comment = Comment(text=text, posted_by=posted_by, flashcard_id=flashcard_id, upvotes=0, downvotes=0)
    db.add(comment)
    await db.commit()
    await db.refresh(comment)
    return comment


async def update(db: AsyncSession, comment_id: int, text: str) -> Comment:
    comment = await get(db, comment_id)
    comment.text = text
    db.add(comment)
    await db.commit()
    await db.refresh(comment)
    return comment


async def delete_comment(db: AsyncSession, comment_id: int) -> int:
    result = await db.execute(delete(Comment).where(Comment.id == comment_id).returning(Comment.id))
    deleted = result.scalar_one_or_none()
    if deleted is None:
        raise NotFoundError(f"No comment with id {comment_id} found")
    await db.commit()
    return deleted


async def _bump(db: AsyncSession, comment_id: int, column) -> int:
    # single UPDATE so concurrent votes never overwrite each other
    q = (
        sql_update(Comment)
        .where(Comment.id == comment_id)
        .values({column: column + 1})
        .returning(column)
        .execution_options(synchronize_session=False)
    )
    result = await db.execute(q)
    count = result.scalar_one_or_none()
    if count is None:
        raise NotFoundError(f"No comment with id {comment_id} found")
    await db.commit()
    return count


async def upvote(db: AsyncSession, comment_id: int) -> int:
    return await _bump(db, comment_id, Comment.upvotes)


async def downvote(db: AsyncSession, comment_id: int) -> int:
    return await _bump(db, comment_id, Comment.downvotes)
