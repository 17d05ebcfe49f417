"""
Maps stored entities, with their references resolved, to the records the
client sees. Author and coordinator ids are replaced by usernames; creation
timestamps are rendered human-readable.
"""
from giveback.models.event import Event
from giveback.models.event_response import EventResponse
from giveback.models.request import Request
from giveback.models.user import User
from giveback.schemas.event import EventDetailResponse
from giveback.schemas.event_response import EventResponseResponse
from giveback.schemas.request import RequestResponse
from giveback.schemas.user import UserResponse
from giveback.utils.timestamps import humanize


def user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        contact=user.contact,
        location=user.location,
        date_joined=humanize(user.date_joined),
    )


def request_to_response(request: Request) -> RequestResponse:
    return RequestResponse(
        id=request.id,
        author=request.author.username,
        contact=request.contact,
        description=request.description,
        color=request.color,
        size=request.size,
        images=list(request.images or []),
        date_created=humanize(request.date_created),
    )


def event_to_response(event: Event) -> EventDetailResponse:
    return EventDetailResponse(
        id=event.id,
        coordinator=event.coordinator.username,
        name=event.name,
        description=event.description,
        location=event.location,
        start_date=event.start_date,
        end_date=event.end_date,
        date_created=humanize(event.date_created),
    )


def event_response_to_response(response: EventResponse) -> EventResponseResponse:
    return EventResponseResponse(
        id=response.id,
        author=response.author.username,
        event_id=response.event_id,
        contact=response.contact,
        description=response.description,
        date_created=humanize(response.date_created),
    )
