from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from flashdeck.schemas.base import CamelModel


class UserCreate(CamelModel):
    username: str = Field(min_length=1, max_length=30)
    password: str = Field(min_length=5, max_length=72)
    first_name: str = Field(min_length=1, max_length=30)
    email: EmailStr


class UserLogin(BaseModel):
    username: str = Field(min_length=1, max_length=30)
    password: str = Field(min_length=1)


class UserUpdate(CamelModel):
    first_name: str = Field(min_length=1, max_length=30)
    email: EmailStr
    profile_picture: Optional[str] = None


class Token(BaseModel):
    token: str


class UserPublic(CamelModel):
    username: str
    first_name: str
    profile_picture: Optional[str] = None
    account_created: Optional[datetime] = None


class UserResponse(UserPublic):
    # left out when someone else's profile is requested
    email: Optional[str] = None


class UserGroup(CamelModel):
    id: int
    name: str
    description: str
    group_picture: str


class UserSet(CamelModel):
    id: int
    name: str
    description: str
    hidden: bool
    created_by: str
    date_created: Optional[datetime] = None


class UserDetail(UserResponse):
    groups: List[UserGroup] = []
    sets: List[UserSet] = []


class UserEnvelope(BaseModel):
    user: UserDetail


class UpdatedUserEnvelope(BaseModel):
    user: UserResponse


class UserList(BaseModel):
    users: List[UserPublic]


class UserGroupList(BaseModel):
    groups: List[UserGroup]


class UserSetList(BaseModel):
    sets: List[UserSet]


class Joined(BaseModel):
    joined: int


class Removed(BaseModel):
    removed: int
