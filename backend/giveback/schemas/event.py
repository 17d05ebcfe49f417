from datetime import date

from pydantic import BaseModel


class EventCreate(BaseModel):
    name: str
    description: str | None = None
    location: str | None = None
    start_date: date
    end_date: date


class EventDetailResponse(BaseModel):
    id: str
    coordinator: str
    name: str
    description: str | None
    location: str | None
    start_date: str
    end_date: str
    date_created: str
