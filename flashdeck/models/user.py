from sqlalchemy import Column, DateTime, String, func
from sqlalchemy.orm import relationship

from flashdeck.core.database import Base


class User(Base):
    __tablename__ = "users"

    username = Column(String(30), primary_key=True)
    password = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    profile_picture = Column(String, nullable=True)
    account_created = Column(DateTime(timezone=True), server_default=func.now())

    sets = relationship("Set", back_populates="creator")
