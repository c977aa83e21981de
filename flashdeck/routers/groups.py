from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from flashdeck.core.database import get_db
from flashdeck.core.deps import (
    group_flashcard_member,
    group_member,
    group_owner,
    group_post_member,
    group_set_member,
    post_author,
)
from flashdeck.core.security import Identity, get_current_user
from flashdeck.crud import flashcards, groups, posts
from flashdeck.schemas.base import Deleted
from flashdeck.schemas.flashcard import (
    Downvotes,
    FlashcardEnvelope,
    FlashcardUpdate,
    GroupFlashcardCreate,
    Upvotes,
)
from flashdeck.schemas.group import GroupCreate, GroupEnvelope, GroupList, GroupUpdate, MemberList
from flashdeck.schemas.post import PostCreate, PostEnvelope, PostList, ReplyEnvelope, ReplyList
from flashdeck.schemas.set import GroupSetCreate, SetEnvelope, SetList

router = APIRouter()


# ====== Group metadata (any logged in user) ======
@router.get("", response_model=GroupList)
async def get_groups(current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return {"groups": await groups.get_all(db)}


@router.get("/{group_id}", response_model=GroupEnvelope)
async def get_group(group_id: int, current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return {"group": await groups.get(db, group_id)}


@router.get("/{group_id}/members", response_model=MemberList)
async def get_members(group_id: int, current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return {"members": await groups.get_members(db, group_id)}


@router.post("", response_model=GroupEnvelope, status_code=201)
async def create_group(data: GroupCreate, current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    """Create a group. The creator joins it in the same transaction."""
    return {"group": await groups.add(db, data, created_by=current_user.username)}


@router.patch("/{group_id}", response_model=GroupEnvelope, status_code=201, dependencies=[Depends(group_owner)])
async def update_group(group_id: int, data: GroupUpdate, db: AsyncSession = Depends(get_db)):
    return {"group": await groups.update(db, group_id, data)}


@router.delete("/{group_id}", response_model=Deleted, dependencies=[Depends(group_owner)])
async def delete_group(group_id: int, db: AsyncSession = Depends(get_db)):
    return {"deleted": await groups.delete_group(db, group_id)}


# ====== Group sets & flashcards (members only) ======
@router.get("/{group_id}/sets", response_model=SetList, dependencies=[Depends(group_member)])
async def get_group_sets(group_id: int, db: AsyncSession = Depends(get_db)):
    return {"sets": await groups.get_sets(db, group_id)}


@router.post("/{group_id}/sets", response_model=SetEnvelope, status_code=201, dependencies=[Depends(group_member)])
async def create_group_set(
    group_id: int,
    data: GroupSetCreate,
    current_user: Identity = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return {"set": await groups.add_set(db, group_id, data, created_by=current_user.username)}


@router.post("/{group_id}/sets/{set_id}/flashcards", response_model=FlashcardEnvelope, status_code=201)
async def create_group_flashcard(data: GroupFlashcardCreate, set_=Depends(group_set_member), db: AsyncSession = Depends(get_db)):
    return {"flashcard": await flashcards.add(db, set_.id, data)}


@router.patch("/{group_id}/flashcards/{flashcard_id}", response_model=FlashcardEnvelope, status_code=201)
async def update_group_flashcard(data: FlashcardUpdate, card=Depends(group_flashcard_member), db: AsyncSession = Depends(get_db)):
    return {"flashcard": await flashcards.update(db, card.id, data)}


@router.delete("/{group_id}/flashcards/{flashcard_id}", response_model=Deleted)
async def delete_group_flashcard(card=Depends(group_flashcard_member), db: AsyncSession = Depends(get_db)):
    return {"deleted": await flashcards.delete_flashcard(db, card.id)}


# ====== Posts ======
@router.get("/{group_id}/posts", response_model=PostList, dependencies=[Depends(group_member)])
async def get_posts(group_id: int, db: AsyncSession = Depends(get_db)):
    return {"posts": await groups.get_posts(db, group_id)}


@router.post("/{group_id}/posts", response_model=PostEnvelope, status_code=201, dependencies=[Depends(group_member)])
async def create_post(
    group_id: int,
    data: PostCreate,
    current_user: Identity = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return {"post": await posts.add(db, group_id, data.text, posted_by=current_user.username)}


@router.post("/{group_id}/posts/{post_id}/reply", response_model=ReplyEnvelope, status_code=201)
async def reply_to_post(
    data: PostCreate,
    post=Depends(group_post_member),
    current_user: Identity = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    reply = await posts.add(db, post.group_id, data.text, posted_by=current_user.username, reply_to=post.id)
    return {"reply": reply}


@router.get("/{group_id}/posts/{post_id}/replies", response_model=ReplyList)
async def get_replies(post=Depends(group_post_member), db: AsyncSession = Depends(get_db)):
    return {"replies": await posts.get_replies(db, post.id)}


@router.patch("/{group_id}/posts/{post_id}", response_model=PostEnvelope, status_code=201)
async def update_post(data: PostCreate, post=Depends(post_author), db: AsyncSession = Depends(get_db)):
    """Only the author may edit, group membership is not enough."""
    return {"post": await posts.update(db, post.id, data.text)}


@router.delete("/{group_id}/posts/{post_id}", response_model=Deleted)
async def delete_post(post=Depends(post_author), db: AsyncSession = Depends(get_db)):
    return {"deleted": await posts.delete_post(db, post.id)}


@router.post("/{group_id}/posts/{post_id}/upvote", response_model=Upvotes, status_code=201)
async def upvote_post(post=Depends(group_post_member), db: AsyncSession = Depends(get_db)):
    return {"upvotes": await posts.upvote(db, post.id)}


@router.post("/{group_id}/posts/{post_id}/downvote", response_model=Downvotes, status_code=201)
async def downvote_post(post=Depends(group_post_member), db: AsyncSession = Depends(get_db)):
    return {"downvotes": await posts.downvote(db, post.id)}
