from sqlalchemy import JSON, Column, ForeignKey, Text
from sqlalchemy.orm import relationship
from giveback.database import Base


class Request(Base):
    __tablename__ = "requests"

    id = Column(Text, primary_key=True)
    author_id = Column(Text, ForeignKey("users.id"), nullable=False)
    contact = Column(Text)
    description = Column(Text, nullable=False)
    color = Column(Text)
    size = Column(Text)
    images = Column(JSON, nullable=False, default=list)
    date_created = Column(Text, nullable=False)

    author = relationship("User")
