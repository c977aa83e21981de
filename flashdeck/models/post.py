from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text, func

from flashdeck.core.database import Base


class Post(Base):
    __tablename__ = "group_posts"
    __table_args__ = (
        CheckConstraint("upvotes >= 0", name="ck_post_upvotes"),
        CheckConstraint("downvotes >= 0", name="ck_post_downvotes"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    text = Column(Text, nullable=False)
    posted_by = Column(String, ForeignKey("users.username"), nullable=False)
    date_posted = Column(DateTime(timezone=True), server_default=func.now())
    # null for top-level posts
    reply_to = Column(Integer, ForeignKey("group_posts.id", ondelete="CASCADE"), nullable=True)
    group_id = Column(Integer, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False)
    upvotes = Column(Integer, nullable=False, default=0)
    downvotes = Column(Integer, nullable=False, default=0)
