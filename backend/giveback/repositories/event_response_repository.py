import logging
import uuid

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from giveback.exceptions import PartialFailureError
from giveback.models.event_response import EventResponse
from giveback.repositories.base_repository import BaseRepository
from giveback.repositories.specifications import FieldEquals, Specification
from giveback.utils.timestamps import utc_now

logger = logging.getLogger(__name__)


class EventResponseRepository(BaseRepository[EventResponse]):
    references = ("author", "event")

    def __init__(self, db: Session):
        super().__init__(db, EventResponse)

    def add_one(
        self,
        author_id: str,
        event_id: str,
        contact: str | None,
        description: str,
        image_url: str | None = None,
    ) -> EventResponse:
        response = EventResponse(
            id=str(uuid.uuid4()),
            author_id=author_id,
            event_id=event_id,
            contact=contact,
            description=description,
            image_url=image_url,
            date_created=utc_now(),
        )
        return self.create(response)

    def find_by_event_id(self, event_id: str) -> list[EventResponse]:
        return self.find_all(FieldEquals(EventResponse.event_id, event_id))

    def find_by_author_id(self, author_id: str) -> list[EventResponse]:
        return self.find_all(FieldEquals(EventResponse.author_id, author_id))

    def delete_by_event_id(self, event_id: str) -> bool:
        return self._cascade_delete(
            FieldEquals(EventResponse.event_id, event_id), f"event {event_id}"
        )

    def delete_by_user_id(self, user_id: str) -> bool:
        return self._cascade_delete(
            FieldEquals(EventResponse.author_id, user_id), f"user {user_id}"
        )

    def _cascade_delete(self, spec: Specification[EventResponse], foreign_key: str) -> bool:
        """
        List every response matching ``spec``, then delete each one by id in
        its own commit.

        Returns True once the listing was produced, including when nothing
        matched. A failing delete does not stop the loop; committed deletions
        stay deleted and PartialFailureError is raised at the end.
        """
        # Plain ids: each commit below expires the loaded instances.
        ids = [response.id for response in self.find_all(spec)]
        deleted_ids: list[str] = []
        failed_ids: list[str] = []

        for response_id in ids:
            try:
                self.delete_one(response_id)
            except SQLAlchemyError as exc:
                self.db.rollback()
                logger.error("Failed to delete response %s for %s: %s", response_id, foreign_key, exc)
                failed_ids.append(response_id)
            else:
                deleted_ids.append(response_id)

        if failed_ids:
            raise PartialFailureError(foreign_key, deleted_ids, failed_ids)

        logger.info("Deleted %d response(s) for %s", len(deleted_ids), foreign_key)
        return True
