from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from flashdeck.schemas.base import CamelModel


class PostCreate(CamelModel):
    text: str = Field(min_length=1, max_length=2000)


class PostResponse(CamelModel):
    id: int
    text: str
    posted_by: str
    date_posted: Optional[datetime] = None
    reply_to: Optional[int] = None
    group_id: int
    upvotes: int
    downvotes: int


class PostEnvelope(BaseModel):
    post: PostResponse


class ReplyEnvelope(BaseModel):
    reply: PostResponse


class PostList(BaseModel):
    posts: List[PostResponse]


class ReplyList(BaseModel):
    replies: List[PostResponse]
