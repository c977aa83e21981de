from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from flashdeck.schemas.base import CamelModel


class GroupCreate(CamelModel):
    name: str = Field(min_length=1, max_length=50)
    description: str = Field(default="", max_length=500)
    group_picture: str = ""


class GroupUpdate(GroupCreate):
    pass


class GroupResponse(CamelModel):
    id: int
    name: str
    description: str
    group_picture: str
    created_by: str
    date_created: Optional[datetime] = None


class GroupEnvelope(BaseModel):
    group: GroupResponse


class GroupList(BaseModel):
    groups: List[GroupResponse]


class Member(CamelModel):
    username: str
    first_name: str
    profile_picture: Optional[str] = None


class MemberList(BaseModel):
    members: List[Member]
