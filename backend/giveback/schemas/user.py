from pydantic import BaseModel


class UserCreate(BaseModel):
    username: str
    contact: str | None = None
    location: str | None = None


class UserResponse(BaseModel):
    id: str
    username: str
    contact: str | None
    location: str | None
    date_joined: str
