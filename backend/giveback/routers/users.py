import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from giveback.database import get_db
from giveback.dependencies import require_current_user
from giveback.exceptions import ForbiddenError
from giveback.models.user import User
from giveback.repositories.event_repository import EventRepository
from giveback.repositories.event_response_repository import EventResponseRepository
from giveback.repositories.request_repository import RequestRepository
from giveback.repositories.user_repository import UserRepository
from giveback.schemas.request import RequestResponse
from giveback.schemas.user import UserCreate, UserResponse
from giveback.services.filter_service import compile_request_filter
from giveback.services.response_shaper import request_to_response, user_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(req: UserCreate, db: Session = Depends(get_db)):
    repo = UserRepository(db)
    if not req.username.strip():
        raise HTTPException(status_code=400, detail="Username must not be empty")
    if repo.find_by_username(req.username):
        raise HTTPException(status_code=409, detail="Username already taken")
    user = repo.add_one(username=req.username, contact=req.contact, location=req.location)
    return user_to_response(user)


@router.get("/{username}", response_model=UserResponse)
async def get_user(username: str, db: Session = Depends(get_db)):
    user = UserRepository(db).find_by_username(username)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user_to_response(user)


@router.get("/{username}/requests", response_model=list[RequestResponse])
async def list_user_requests(username: str, db: Session = Depends(get_db)):
    spec = compile_request_filter(db, author=username)
    return [request_to_response(r) for r in RequestRepository(db).find_all(spec)]


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    user: User = Depends(require_current_user),
    db: Session = Depends(get_db),
):
    if user_id != user.id:
        raise ForbiddenError("Cannot delete other users' accounts.", user.id)

    responses = EventResponseRepository(db)
    responses.delete_by_user_id(user_id)
    RequestRepository(db).delete_by_author(user_id)

    events = EventRepository(db)
    event_ids = [event.id for event in events.find_by_coordinator(user_id)]
    for event_id in event_ids:
        responses.delete_by_event_id(event_id)
        events.delete_one(event_id)

    UserRepository(db).delete_one(user_id)
    logger.info("Deleted user %s", user_id)
    return {"message": "Your account has been deleted."}
