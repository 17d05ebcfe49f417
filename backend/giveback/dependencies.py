from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from giveback.database import get_db
from giveback.models.user import User
from giveback.repositories.user_repository import UserRepository


async def require_current_user(
    x_user_id: str = Header(...),
    db: Session = Depends(get_db),
) -> User:
    # The upstream session layer sets X-User-Id; it is trusted as-is.
    user = UserRepository(db).find_one(x_user_id)
    if user is None:
        raise HTTPException(status_code=401, detail="Unknown user")
    return user
