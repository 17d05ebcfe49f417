import uuid
from datetime import date

from sqlalchemy.orm import Session

from giveback.models.event import Event
from giveback.repositories.base_repository import BaseRepository
from giveback.repositories.specifications import FieldEquals
from giveback.utils.timestamps import utc_now


class EventRepository(BaseRepository[Event]):
    references = ("coordinator",)

    def __init__(self, db: Session):
        super().__init__(db, Event)

    def add_one(
        self,
        coordinator_id: str,
        name: str,
        description: str | None,
        location: str | None,
        start_date: date,
        end_date: date,
    ) -> Event:
        event = Event(
            id=str(uuid.uuid4()),
            coordinator_id=coordinator_id,
            name=name,
            description=description,
            location=location,
            start_date=start_date.isoformat(),
            end_date=end_date.isoformat(),
            date_created=utc_now(),
        )
        return self.create(event)

    def find_by_coordinator(self, coordinator_id: str) -> list[Event]:
        return self.find_all(FieldEquals(Event.coordinator_id, coordinator_id))
