from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from flashdeck.schemas.base import CamelModel


class SetCreate(CamelModel):
    name: str = Field(min_length=1, max_length=50)
    description: str = Field(default="", max_length=500)
    hidden: bool = False
    side_one_name: str = Field(default="", max_length=30)
    side_two_name: str = Field(default="", max_length=30)


class GroupSetCreate(CamelModel):
    name: str = Field(min_length=1, max_length=50)
    description: str = Field(default="", max_length=500)
    side_one_name: str = Field(default="", max_length=30)
    side_two_name: str = Field(default="", max_length=30)


class SetUpdate(CamelModel):
    name: str = Field(min_length=1, max_length=50)
    description: str = Field(default="", max_length=500)
    side_one_name: str = Field(default="", max_length=30)
    side_two_name: str = Field(default="", max_length=30)


class SetResponse(CamelModel):
    id: int
    name: str
    description: str
    hidden: bool
    side_one_name: str
    side_two_name: str
    created_by: str
    date_created: Optional[datetime] = None


class SetFlashcard(CamelModel):
    id: int
    side_one_text: str
    side_two_text: str
    side_one_image_url: str
    side_two_image_url: str


class SetDetail(SetResponse):
    flashcards: List[SetFlashcard] = []


class PublicSet(CamelModel):
    id: int
    name: str
    description: str
    created_by: str
    date_created: Optional[datetime] = None
    num_flashcards: int


class SetEnvelope(BaseModel):
    set: SetResponse


class SetDetailEnvelope(BaseModel):
    set: SetDetail


class SetList(BaseModel):
    sets: List[SetResponse]


class PublicSetList(BaseModel):
    sets: List[PublicSet]
