from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from flashdeck.core.database import Base


class Flashcard(Base):
    __tablename__ = "flashcards"

    id = Column(Integer, primary_key=True, autoincrement=True)
    side_one_text = Column(Text, nullable=False, default="")
    side_two_text = Column(Text, nullable=False, default="")
    side_one_image_url = Column(Text, nullable=False, default="")
    side_two_image_url = Column(Text, nullable=False, default="")
    set_id = Column(Integer, ForeignKey("sets.id", ondelete="CASCADE"), nullable=False)

    set = relationship("Set", back_populates="flashcards")
