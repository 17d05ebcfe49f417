from pydantic import BaseModel


class EventResponseCreate(BaseModel):
    contact: str | None = None
    description: str
    image_url: str | None = None


class EventResponseResponse(BaseModel):
    id: str
    author: str
    event_id: str
    contact: str | None
    description: str | None
    date_created: str


class CascadeDeleteResponse(BaseModel):
    success: bool
