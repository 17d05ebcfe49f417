from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from giveback.database import get_db
from giveback.dependencies import require_current_user
from giveback.exceptions import ForbiddenError
from giveback.models.user import User
from giveback.repositories.event_repository import EventRepository
from giveback.repositories.event_response_repository import EventResponseRepository
from giveback.repositories.user_repository import UserRepository
from giveback.schemas.event_response import (
    CascadeDeleteResponse,
    EventResponseCreate,
    EventResponseResponse,
)
from giveback.services.content_service import validate_description
from giveback.services.response_shaper import event_response_to_response

router = APIRouter(tags=["responses"])


def _require_event(db: Session, event_id: str):
    event = EventRepository(db).find_one(event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


def _require_user_id(db: Session, user_id: str):
    if UserRepository(db).find_one(user_id) is None:
        raise HTTPException(status_code=404, detail="User not found")


@router.get("/responses", response_model=list[EventResponseResponse])
async def list_responses(db: Session = Depends(get_db)):
    responses = EventResponseRepository(db).find_all()
    return [event_response_to_response(r) for r in responses]


@router.get("/events/{event_id}/responses", response_model=list[EventResponseResponse])
async def list_event_responses(event_id: str, db: Session = Depends(get_db)):
    _require_event(db, event_id)
    responses = EventResponseRepository(db).find_by_event_id(event_id)
    return [event_response_to_response(r) for r in responses]


@router.get("/users/{user_id}/responses", response_model=list[EventResponseResponse])
async def list_user_responses(user_id: str, db: Session = Depends(get_db)):
    _require_user_id(db, user_id)
    responses = EventResponseRepository(db).find_by_author_id(user_id)
    return [event_response_to_response(r) for r in responses]


@router.post("/events/{event_id}/responses", response_model=EventResponseResponse, status_code=201)
async def create_response(
    event_id: str,
    req: EventResponseCreate,
    user: User = Depends(require_current_user),
    db: Session = Depends(get_db),
):
    _require_event(db, event_id)
    description = validate_description(req.description, kind="Response")
    response = EventResponseRepository(db).add_one(
        author_id=user.id,
        event_id=event_id,
        contact=req.contact,
        description=description,
        image_url=req.image_url,
    )
    return event_response_to_response(response)


@router.delete("/responses/{response_id}")
async def delete_response(
    response_id: str,
    user: User = Depends(require_current_user),
    db: Session = Depends(get_db),
):
    repo = EventResponseRepository(db)
    response = repo.find_one(response_id)
    if not response:
        raise HTTPException(status_code=404, detail="Response not found")
    if response.author_id != user.id:
        raise ForbiddenError("Cannot delete other users' responses.", user.id)
    repo.delete_one(response_id)
    return {"message": "Your response has successfully been deleted."}


@router.delete("/events/{event_id}/responses", response_model=CascadeDeleteResponse)
async def delete_event_responses(
    event_id: str,
    user: User = Depends(require_current_user),
    db: Session = Depends(get_db),
):
    event = _require_event(db, event_id)
    if event.coordinator_id != user.id:
        raise ForbiddenError("Only the event coordinator can clear its responses.", user.id)
    return CascadeDeleteResponse(success=EventResponseRepository(db).delete_by_event_id(event_id))


@router.delete("/users/{user_id}/responses", response_model=CascadeDeleteResponse)
async def delete_user_responses(
    user_id: str,
    user: User = Depends(require_current_user),
    db: Session = Depends(get_db),
):
    _require_user_id(db, user_id)
    if user_id != user.id:
        raise ForbiddenError("Cannot delete other users' responses.", user.id)
    return CascadeDeleteResponse(success=EventResponseRepository(db).delete_by_user_id(user_id))
