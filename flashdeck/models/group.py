from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from flashdeck.core.database import Base

DEFAULT_GROUP_PICTURE = "https://geodash.gov.bd/uploaded/people_group/default_group.png"


class Group(Base):
    __tablename__ = "groups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    group_picture = Column(String, nullable=False, default=DEFAULT_GROUP_PICTURE)
    created_by = Column(String, ForeignKey("users.username"), nullable=False)
    date_created = Column(DateTime(timezone=True), server_default=func.now())


class Membership(Base):
    __tablename__ = "groups_members"

    group_id = Column(Integer, ForeignKey("groups.id", ondelete="CASCADE"), primary_key=True)
    member_username = Column(String, ForeignKey("users.username"), primary_key=True)
