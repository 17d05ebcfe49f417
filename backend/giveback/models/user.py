from sqlalchemy import Column, Text
from giveback.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Text, primary_key=True)
    username = Column(Text, nullable=False, unique=True)
    contact = Column(Text)
    location = Column(Text)
    date_joined = Column(Text, nullable=False)
