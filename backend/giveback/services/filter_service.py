"""
Compiles optional list-query parameters into a single specification.

Each entity kind declares a fixed set of filter dimensions. A dimension maps
a raw value to one clause; the compiler ANDs the clauses of every present
dimension. Absent means ``None`` or the empty string. Nothing present
compiles to a match-all specification.
"""
import logging
from datetime import date
from typing import Any, Callable, Generic, Mapping, TypeVar

from sqlalchemy.orm import Session

from giveback.exceptions import NotFoundError
from giveback.models.event import Event
from giveback.models.request import Request
from giveback.repositories.specifications import (
    FieldEquals,
    Specification,
    WithinDates,
    all_of,
)
from giveback.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

Dimension = Callable[[Any], Specification[T]]


def _is_present(value: Any) -> bool:
    return value is not None and value != ""


class FilterCompiler(Generic[T]):
    def __init__(self, dimensions: Mapping[str, Dimension]):
        self.dimensions = dict(dimensions)

    def compile(self, values: Mapping[str, Any]) -> Specification[T]:
        unknown = set(values) - set(self.dimensions)
        if unknown:
            raise ValueError(f"Unknown filter dimension(s): {sorted(unknown)}")

        clauses = [
            build(values[name])
            for name, build in self.dimensions.items()
            if _is_present(values.get(name))
        ]
        return all_of(clauses)


def request_filter_compiler(db: Session) -> FilterCompiler[Request]:
    def by_author(username: str) -> Specification[Request]:
        author = UserRepository(db).find_by_username(username)
        if author is None:
            raise NotFoundError("User", username, f"A user with username {username} does not exist.")
        return FieldEquals(Request.author_id, author.id)

    return FilterCompiler({
        "author": by_author,
        "color": lambda color: FieldEquals(Request.color, color),
        "size": lambda size: FieldEquals(Request.size, size),
    })


def event_filter_compiler(db: Session) -> FilterCompiler[Event]:
    def by_coordinator(coordinator_id: str) -> Specification[Event]:
        if UserRepository(db).find_one(coordinator_id) is None:
            raise NotFoundError("User", coordinator_id)
        return FieldEquals(Event.coordinator_id, coordinator_id)

    def by_dates(window: tuple[date, date]) -> Specification[Event]:
        start, end = window
        return WithinDates(Event.start_date, Event.end_date, start, end)

    return FilterCompiler({
        "coordinator": by_coordinator,
        "date_range": by_dates,
        "location": lambda location: FieldEquals(Event.location, location),
    })


def compile_request_filter(
    db: Session,
    author: str | None = None,
    color: str | None = None,
    size: str | None = None,
) -> Specification[Request]:
    return request_filter_compiler(db).compile({"author": author, "color": color, "size": size})


def parse_range_bound(value: date | str | None) -> date | None:
    """
    Coerce one end of a query-string date range.

    Browsers send ``endrange=`` or ``endrange=null`` for an unset picker, so
    anything that is not an ISO ``YYYY-MM-DD`` date counts as absent.
    """
    if value is None or isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        if value.strip():
            logger.debug("Ignoring unparseable date range bound %r", value)
        return None


def compile_event_filter(
    db: Session,
    coordinator: str | None = None,
    location: str | None = None,
    start_date: date | str | None = None,
    end_date: date | str | None = None,
) -> Specification[Event]:
    start_date = parse_range_bound(start_date)
    end_date = parse_range_bound(end_date)
    # Both ends or nothing: a lone start (or end) is not an open-ended range.
    date_range = (start_date, end_date) if start_date and end_date else None
    if date_range is None and (start_date or end_date):
        logger.debug("Ignoring incomplete date range start=%s end=%s", start_date, end_date)

    return event_filter_compiler(db).compile({
        "coordinator": coordinator,
        "date_range": date_range,
        "location": location,
    })
