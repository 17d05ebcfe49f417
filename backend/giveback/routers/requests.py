from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from giveback.database import get_db
from giveback.dependencies import require_current_user
from giveback.exceptions import ForbiddenError, NotFoundError
from giveback.models.request import Request
from giveback.models.user import User
from giveback.repositories.request_repository import RequestRepository
from giveback.schemas.request import RequestCreate, RequestImageCreate, RequestResponse, RequestUpdate
from giveback.services.content_service import validate_description
from giveback.services.filter_service import compile_request_filter
from giveback.services.response_shaper import request_to_response

router = APIRouter(prefix="/requests", tags=["requests"])


def _get_owned_request(repo: RequestRepository, request_id: str, user: User) -> Request:
    request = repo.find_one(request_id)
    if request is None:
        raise NotFoundError("Request", request_id, f"Request with request ID {request_id} does not exist.")
    if request.author_id != user.id:
        raise ForbiddenError("Cannot modify other users' requests.", user.id)
    return request


@router.get("", response_model=list[RequestResponse])
async def list_requests(
    author: str | None = None,
    color: str | None = None,
    size: str | None = None,
    db: Session = Depends(get_db),
):
    spec = compile_request_filter(db, author=author, color=color, size=size)
    requests = RequestRepository(db).find_all(spec)
    return [request_to_response(r) for r in requests]


@router.post("", response_model=RequestResponse, status_code=201)
async def create_request(
    req: RequestCreate,
    user: User = Depends(require_current_user),
    db: Session = Depends(get_db),
):
    description = validate_description(req.description)
    request = RequestRepository(db).add_one(
        author_id=user.id,
        contact=req.contact,
        description=description,
        color=req.color,
        size=req.size,
    )
    return request_to_response(request)


@router.get("/{request_id}", response_model=RequestResponse)
async def get_request(request_id: str, db: Session = Depends(get_db)):
    request = RequestRepository(db).find_one(request_id)
    if not request:
        raise HTTPException(status_code=404, detail="Request not found")
    return request_to_response(request)


@router.patch("/{request_id}", response_model=RequestResponse)
async def update_request(
    request_id: str,
    req: RequestUpdate,
    user: User = Depends(require_current_user),
    db: Session = Depends(get_db),
):
    repo = RequestRepository(db)
    _get_owned_request(repo, request_id, user)
    description = validate_description(req.description)
    return request_to_response(repo.update_description(request_id, description))


@router.delete("/{request_id}")
async def delete_request(
    request_id: str,
    user: User = Depends(require_current_user),
    db: Session = Depends(get_db),
):
    repo = RequestRepository(db)
    _get_owned_request(repo, request_id, user)
    repo.delete_one(request_id)
    return {"message": "Your request was deleted successfully."}


@router.get("/{request_id}/images", response_model=list[str])
async def list_request_images(request_id: str, db: Session = Depends(get_db)):
    return RequestRepository(db).get_images(request_id)


@router.post("/{request_id}/images", response_model=RequestResponse, status_code=201)
async def add_request_image(
    request_id: str,
    req: RequestImageCreate,
    user: User = Depends(require_current_user),
    db: Session = Depends(get_db),
):
    repo = RequestRepository(db)
    _get_owned_request(repo, request_id, user)
    return request_to_response(repo.append_image(request_id, req.image_url))
