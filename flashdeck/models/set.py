from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Table, Text, func
from sqlalchemy.orm import relationship

from flashdeck.core.database import Base

# a set belongs to at most one group
groups_sets = Table(
    "groups_sets",
    Base.metadata,
    Column("group_id", Integer, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False),
    Column("set_id", Integer, ForeignKey("sets.id", ondelete="CASCADE"), primary_key=True),
)


class Set(Base):
    __tablename__ = "sets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    hidden = Column(Boolean, nullable=False, default=False)
    side_one_name = Column(String, nullable=False, default="")
    side_two_name = Column(String, nullable=False, default="")
    created_by = Column(String, ForeignKey("users.username"), nullable=False)
    date_created = Column(DateTime(timezone=True), server_default=func.now())

    creator = relationship("User", back_populates="sets")
    flashcards = relationship(
        "Flashcard",
        back_populates="set",
        order_by="Flashcard.id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
