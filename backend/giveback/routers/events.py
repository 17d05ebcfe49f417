import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy.orm import Session

from giveback.database import get_db
from giveback.dependencies import require_current_user
from giveback.exceptions import ForbiddenError
from giveback.models.user import User
from giveback.repositories.event_repository import EventRepository
from giveback.repositories.event_response_repository import EventResponseRepository
from giveback.schemas.event import EventCreate, EventDetailResponse
from giveback.services.calendar_service import generate_event_ics
from giveback.services.filter_service import compile_event_filter
from giveback.services.response_shaper import event_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=list[EventDetailResponse])
async def list_events(
    coordinator: str | None = None,
    location: str | None = None,
    startrange: str | None = None,
    endrange: str | None = None,
    db: Session = Depends(get_db),
):
    spec = compile_event_filter(
        db,
        coordinator=coordinator,
        location=location,
        start_date=startrange,
        end_date=endrange,
    )
    events = EventRepository(db).find_all(spec)
    return [event_to_response(e) for e in events]


@router.post("", response_model=EventDetailResponse, status_code=201)
async def create_event(
    req: EventCreate,
    user: User = Depends(require_current_user),
    db: Session = Depends(get_db),
):
    if req.end_date < req.start_date:
        raise HTTPException(status_code=400, detail="end_date must not be before start_date")
    event = EventRepository(db).add_one(
        coordinator_id=user.id,
        name=req.name,
        description=req.description,
        location=req.location,
        start_date=req.start_date,
        end_date=req.end_date,
    )
    return event_to_response(event)


@router.get("/{event_id}", response_model=EventDetailResponse)
async def get_event(event_id: str, db: Session = Depends(get_db)):
    event = EventRepository(db).find_one(event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event_to_response(event)


@router.delete("/{event_id}")
async def delete_event(
    event_id: str,
    user: User = Depends(require_current_user),
    db: Session = Depends(get_db),
):
    repo = EventRepository(db)
    event = repo.find_one(event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    if event.coordinator_id != user.id:
        raise ForbiddenError("Cannot delete other users' events.", user.id)

    # Responses hold only a weak reference, so they are removed explicitly.
    EventResponseRepository(db).delete_by_event_id(event_id)
    repo.delete_one(event_id)
    logger.info("Deleted event %s", event_id)
    return {"message": "Your event was deleted successfully."}


@router.get("/{event_id}/calendar")
async def event_calendar(event_id: str, db: Session = Depends(get_db)):
    event = EventRepository(db).find_one(event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")

    ics_data = generate_event_ics(
        event_id=event.id,
        name=event.name,
        location=event.location,
        description=event.description,
        start_date=event.start_date,
        end_date=event.end_date,
    )
    return Response(
        content=ics_data,
        media_type="text/calendar",
        headers={"Content-Disposition": f'attachment; filename="event_{event_id[:8]}.ics"'},
    )
