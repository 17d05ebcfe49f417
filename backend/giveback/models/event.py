from sqlalchemy import Column, ForeignKey, Text
from sqlalchemy.orm import relationship
from giveback.database import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(Text, primary_key=True)
    coordinator_id = Column(Text, ForeignKey("users.id"), nullable=False)
    name = Column(Text, nullable=False)
    description = Column(Text)
    location = Column(Text)
    start_date = Column(Text, nullable=False)
    end_date = Column(Text, nullable=False)
    date_created = Column(Text, nullable=False)

    coordinator = relationship("User")
