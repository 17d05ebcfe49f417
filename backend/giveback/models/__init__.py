from giveback.models.user import User
from giveback.models.request import Request
from giveback.models.event import Event
from giveback.models.event_response import EventResponse

__all__ = ["User", "Request", "Event", "EventResponse"]
