from sqlalchemy import Column, ForeignKey, Text
from sqlalchemy.orm import relationship
from giveback.database import Base


class EventResponse(Base):
    __tablename__ = "event_responses"

    id = Column(Text, primary_key=True)
    author_id = Column(Text, ForeignKey("users.id"), nullable=False)
    # Weak reference: the event may be deleted without touching its responses.
    event_id = Column(Text, nullable=False)
    contact = Column(Text)
    description = Column(Text)
    image_url = Column(Text)
    date_created = Column(Text, nullable=False)

    author = relationship("User")
    event = relationship(
        "Event",
        primaryjoin="foreign(EventResponse.event_id) == Event.id",
        viewonly=True,
    )
