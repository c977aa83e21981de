from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from flashdeck.core.database import get_db
from flashdeck.core.deps import set_editor, set_viewer
from flashdeck.core.security import Identity, get_current_user
from flashdeck.crud import sets
from flashdeck.schemas.base import Deleted
from flashdeck.schemas.set import (
    PublicSetList,
    SetCreate,
    SetDetailEnvelope,
    SetEnvelope,
    SetUpdate,
)

router = APIRouter()


@router.get("", response_model=PublicSetList)
async def get_public_sets(current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return {"sets": await sets.get_public(db)}


@router.get("/{set_id}", response_model=SetDetailEnvelope, dependencies=[Depends(set_viewer)])
async def get_set(set_id: int, db: AsyncSession = Depends(get_db)):
    """The set with its flashcards. Hidden sets are only shown to their creator."""
    return {"set": await sets.get_with_flashcards(db, set_id)}


@router.post("", response_model=SetEnvelope, status_code=201)
async def create_set(data: SetCreate, current_user: Identity = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return {"set": await sets.add(db, data, created_by=current_user.username)}


@router.patch("/{set_id}", response_model=SetEnvelope, status_code=201, dependencies=[Depends(set_editor)])
async def update_set(set_id: int, data: SetUpdate, db: AsyncSession = Depends(get_db)):
    return {"set": await sets.update(db, set_id, data)}


@router.delete("/{set_id}", response_model=Deleted, dependencies=[Depends(set_editor)])
async def delete_set(set_id: int, db: AsyncSession = Depends(get_db)):
    return {"deleted": await sets.delete_set(db, set_id)}
