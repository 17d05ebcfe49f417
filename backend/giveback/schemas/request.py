from pydantic import BaseModel


class RequestCreate(BaseModel):
    contact: str | None = None
    description: str
    color: str | None = None
    size: str | None = None


class RequestUpdate(BaseModel):
    description: str


class RequestImageCreate(BaseModel):
    image_url: str


class RequestResponse(BaseModel):
    id: str
    author: str
    contact: str | None
    description: str
    color: str | None
    size: str | None
    images: list[str] = []
    date_created: str
