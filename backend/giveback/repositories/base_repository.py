"""
Base repository shared by the entity repositories.

Every list returned from here has its foreign references eager-loaded onto
their relationship attributes and is ordered newest first by
``date_created``.
"""

from typing import Generic, Type, TypeVar

from sqlalchemy.orm import Query, Session, joinedload

from giveback.repositories.specifications import Specification

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Generic repository over one model with a creation timestamp column.

    Subclasses name the relationships to resolve in ``references`` and may
    point ``created_column`` at a differently named timestamp.
    """

    references: tuple[str, ...] = ()
    created_column: str = "date_created"

    def __init__(self, db: Session, model: Type[T]):
        """
        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def _query(self) -> Query:
        query = self.db.query(self.model)
        for name in self.references:
            query = query.options(joinedload(getattr(self.model, name)))
        return query

    def create(self, obj: T) -> T:
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def find_one(self, id: str) -> T | None:
        return self._query().filter(self.model.id == id).first()

    def find_all(self, spec: Specification[T] | None = None) -> list[T]:
        """
        Return every record satisfying ``spec`` (all records when None),
        newest first, with references resolved.
        """
        query = self._query()
        if spec is not None:
            query = query.filter(spec.to_sql_filter())
        return query.order_by(getattr(self.model, self.created_column).desc()).all()

    def delete_one(self, id: str) -> bool:
        """
        Delete a single record by id.

        Returns:
            True if a record was deleted, False if the id did not exist
        """
        deleted = (
            self.db.query(self.model)
            .filter(self.model.id == id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted > 0
