from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from flashdeck.core.database import get_db
from flashdeck.core.deps import comment_author, flashcard_editor, flashcard_viewer
from flashdeck.core.permissions import ensure_set_editor
from flashdeck.core.security import Identity, get_current_user
from flashdeck.crud import comments, flashcards
from flashdeck.schemas.base import Deleted
from flashdeck.schemas.flashcard import (
    CommentCreate,
    CommentEnvelope,
    CommentList,
    Downvotes,
    FlashcardCreate,
    FlashcardEnvelope,
    FlashcardUpdate,
    Upvotes,
)

router = APIRouter()


@router.get("/{flashcard_id}", response_model=FlashcardEnvelope)
async def get_flashcard(card=Depends(flashcard_viewer)):
    return {"flashcard": card}


@router.post("", response_model=FlashcardEnvelope, status_code=201)
async def create_flashcard(data: FlashcardCreate, current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    # the target set is only known once the body is parsed
    await ensure_set_editor(db, current_user, data.set_id)
    return {"flashcard": await flashcards.add(db, data.set_id, data)}


@router.patch("/{flashcard_id}", response_model=FlashcardEnvelope, status_code=201, dependencies=[Depends(flashcard_editor)])
async def update_flashcard(flashcard_id: int, data: FlashcardUpdate, db: AsyncSession = Depends(get_db)):
    return {"flashcard": await flashcards.update(db, flashcard_id, data)}


@router.delete("/{flashcard_id}", response_model=Deleted, dependencies=[Depends(flashcard_editor)])
async def delete_flashcard(flashcard_id: int, db: AsyncSession = Depends(get_db)):
    return {"deleted": await flashcards.delete_flashcard(db, flashcard_id)}


# ====== Comments ======
@router.get("/{flashcard_id}/comments", response_model=CommentList, dependencies=[Depends(flashcard_viewer)])
async def get_comments(flashcard_id: int, db: AsyncSession = Depends(get_db)):
    return {"comments": await flashcards.get_comments(db, flashcard_id)}


@router.post("/{flashcard_id}/comments", response_model=CommentEnvelope, status_code=201, dependencies=[Depends(flashcard_viewer)])
async def add_comment(
    flashcard_id: int,
    data: CommentCreate,
    current_user: Identity = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    comment = await comments.add(db, flashcard_id, data.text, posted_by=current_user.username)
    return {"comment": comment}


@router.patch("/comments/{comment_id}", response_model=CommentEnvelope, status_code=201, dependencies=[Depends(comment_author)])
async def update_comment(comment_id: int, data: CommentCreate, db: AsyncSession = Depends(get_db)):
    return {"comment": await comments.update(db, comment_id, data.text)}


@router.delete("/comments/{comment_id}", response_model=Deleted, dependencies=[Depends(comment_author)])
async def delete_comment(comment_id: int, db: AsyncSession = Depends(get_db)):
    return {"deleted": await comments.delete_comment(db, comment_id)}


@router.post("/comments/{comment_id}/upvote", response_model=Upvotes)
async def upvote_comment(comment_id: int, current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return {"upvotes": await comments.upvote(db, comment_id)}


@router.post("/comments/{comment_id}/downvote", response_model=Downvotes)
async def downvote_comment(comment_id: int, current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return {"downvotes": await comments.downvote(db, comment_id)}
