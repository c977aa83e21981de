from sqlalchemy import delete, select, update as sql_update
from sqlalchemy.ext.asyncio import AsyncSession

from flashdeck.core.errors import NotFoundError
from flashdeck.models.post import Post


async def get(db: AsyncSession, post_id: int) -> Post:
    result = await db.execute(select(Post).where(Post.id == post_id))
    post = result.scalars().first()
    if post is None:
        raise NotFoundError(f"No post with id {post_id} found.")
    return post


async def get_in_group(db: AsyncSession, group_id: int, post_id: int) -> Post:
    post = await get(db, post_id)
    if post.group_id != group_id:
        raise NotFoundError(f"No post with id {post_id} found in group {group_id}.")
    return post


async def get_replies(db: AsyncSession, post_id: int):
    result = await db.execute(select(Post).where(Post.reply_to == post_id).order_by(Post.id))
    return result.scalars().all()


async def add(db: AsyncSession, group_id: int, text: str, posted_by: str, reply_to: int | None = None) -> Post:
    post = Post(text=text, posted_by=posted_by, group_id=group_id, reply_to=reply_to, upvotes=0, downvotes=0)
    db.add(post)
    await db.commit()
    await db.refresh(post)
    return post


async def update(db: AsyncSession, post_id: int, text: str) -> Post:
    post = await get(db, post_id)
    post.text = text
    db.add(post)
    await db.commit()
    await db.refresh(post)
    return post


async def delete_post(db: AsyncSession, post_id: int) -> int:
    result = await db.execute(delete(Post).where(Post.id == post_id).returning(Post.id))
    deleted = result.scalar_one_or_none()
    if deleted is None:
        raise NotFoundError(f"No post with id {post_id} found")
    await db.commit()
    return deleted


async def _bump(db: AsyncSession, post_id: int, column) -> int:
    q = (
        sql_update(Post)
        .where(Post.id == post_id)
        .values({column: column + 1})
        .returning(column)
        .execution_options(synchronize_session=False)
    )
    result = await db.execute(q)
    count = result.scalar_one_or_none()
    if count is None:
        raise NotFoundError(f"No post with id {post_id} found")
    await db.commit()
    return count


async def upvote(db: AsyncSession, post_id: int) -> int:
    return await _bump(db, post_id, Post.upvotes)


async def downvote(db: AsyncSession, post_id: int) -> int:
    return await _bump(db, post_id, Post.downvotes)
