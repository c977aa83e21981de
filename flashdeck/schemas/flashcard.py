from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from flashdeck.schemas.base import CamelModel


class FlashcardSides(CamelModel):
    side_one_text: str = ""
    side_two_text: str = ""
    side_one_image_url: str = ""
    side_two_image_url: str = ""

    @model_validator(mode="after")
    def check_both_sides(self):
        missing = []
        if not (self.side_one_text or self.side_one_image_url):
            missing.append("side one needs text or an image url")
        if not (self.side_two_text or self.side_two_image_url):
            missing.append("side two needs text or an image url")
        if missing:
            raise ValueError("; ".join(missing))
        return self


class FlashcardCreate(FlashcardSides):
    set_id: int


class GroupFlashcardCreate(FlashcardSides):
    pass


class FlashcardUpdate(FlashcardSides):
    pass


class FlashcardResponse(CamelModel):
    id: int
    side_one_text: str
    side_two_text: str
    side_one_image_url: str
    side_two_image_url: str
    set_id: int


class FlashcardEnvelope(BaseModel):
    flashcard: FlashcardResponse


class CommentCreate(CamelModel):
    text: str = Field(min_length=1, max_length=1000)


class CommentResponse(CamelModel):
    id: int
    text: str
    posted_by: str
    date_posted: Optional[datetime] = None
    flashcard_id: int
    upvotes: int
    downvotes: int


class CommentEnvelope(BaseModel):
    comment: CommentResponse


class CommentList(BaseModel):
    comments: List[CommentResponse]


class Upvotes(BaseModel):
    upvotes: int


class Downvotes(BaseModel):
    downvotes: int
