import uuid

from sqlalchemy.orm import Session

from giveback.models.user import User
from giveback.repositories.base_repository import BaseRepository
from giveback.utils.timestamps import utc_now


class UserRepository(BaseRepository[User]):
    created_column = "date_joined"

    def __init__(self, db: Session):
        super().__init__(db, User)

    def add_one(self, username: str, contact: str | None = None, location: str | None = None) -> User:
        user = User(
            id=str(uuid.uuid4()),
            username=username,
            contact=contact,
            location=location,
            date_joined=utc_now(),
        )
        return self.create(user)

    def find_by_username(self, username: str) -> User | None:
        return self._query().filter(User.username == username).first()
