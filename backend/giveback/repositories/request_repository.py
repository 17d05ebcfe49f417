import logging
import uuid

from sqlalchemy.orm import Session

from giveback.exceptions import NotFoundError
from giveback.models.request import Request
from giveback.repositories.base_repository import BaseRepository
from giveback.utils.timestamps import utc_now

logger = logging.getLogger(__name__)


class RequestRepository(BaseRepository[Request]):
    references = ("author",)

    def __init__(self, db: Session):
        super().__init__(db, Request)

    def add_one(
        self,
        author_id: str,
        contact: str | None,
        description: str,
        color: str | None,
        size: str | None,
    ) -> Request:
        request = Request(
            id=str(uuid.uuid4()),
            author_id=author_id,
            contact=contact,
            description=description,
            color=color,
            size=size,
            images=[],
            date_created=utc_now(),
        )
        return self.create(request)

    def _require(self, request_id: str) -> Request:
        request = self.find_one(request_id)
        if request is None:
            raise NotFoundError("Request", request_id)
        return request

    def update_description(self, request_id: str, description: str) -> Request:
        request = self._require(request_id)
        request.description = description
        self.db.commit()
        self.db.refresh(request)
        return request

    def get_images(self, request_id: str) -> list[str]:
        return list(self._require(request_id).images)

    def append_image(self, request_id: str, image_url: str) -> Request:
        # Rewrites the whole list; concurrent appends are last-write-wins.
        request = self._require(request_id)
        request.images = [*request.images, image_url]
        self.db.commit()
        self.db.refresh(request)
        return request

    def delete_by_author(self, author_id: str) -> int:
        deleted = (
            self.db.query(Request)
            .filter(Request.author_id == author_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        logger.info("Deleted %d request(s) by author %s", deleted, author_id)
        return deleted
