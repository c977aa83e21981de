import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from flashdeck.core.database import get_db
from flashdeck.core.security import Identity, authenticate, create_access_token
from flashdeck.crud import users
from flashdeck.schemas.user import Token, UserCreate, UserLogin

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/token", response_model=Token)
async def login_user(data: UserLogin, db: AsyncSession = Depends(get_db)):
    """Trade a username and password for a bearer token."""
    user = await authenticate(db, data.username, data.password)
    logger.info("issued token for %s", user.username)
    return {"token": create_access_token(Identity(username=user.username))}


@router.post("/register", response_model=Token, status_code=201)
async def register_user(data: UserCreate, db: AsyncSession = Depends(get_db)):
    new_user = await users.register(db, data)
    logger.info("registered %s", new_user.username)
    return {"token": create_access_token(Identity(username=new_user.username))}
