from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text, func

from flashdeck.core.database import Base


class Comment(Base):
    __tablename__ = "flashcard_comments"
    __table_args__ = (
        CheckConstraint("upvotes >= 0", name="ck_comment_upvotes"),
        CheckConstraint("downvotes >= 0", name="ck_comment_downvotes"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    text = Column(Text, nullable=False)
    posted_by = Column(String, ForeignKey("users.username"), nullable=False)
    date_posted = Column(DateTime(timezone=True), server_default=func.now())
    flashcard_id = Column(Integer, ForeignKey("flashcards.id", ondelete="CASCADE"), nullable=False)
    upvotes = Column(Integer, nullable=False, default=0)
    downvotes = Column(Integer, nullable=False, default=0)
