"""
Users Router - read-only user resources for authenticated callers.
"""
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..db import get_db
from ..deps import authenticate_user
from ..models import User
from ..schemas import ErrorResponse, UserCollectionDocument, UserDocument
from ..serializers import user_collection_document, user_document

router = APIRouter(
    prefix="/api/v1/users",
    tags=["users"],
    responses={401: {"model": ErrorResponse}},
)
logger = logging.getLogger(__name__)


@router.get("", response_model=UserCollectionDocument)
def list_users(user: User = Depends(authenticate_user), db: Session = Depends(get_db)):
    users = db.query(User).order_by(User.id.asc()).all()
    logger.debug("User list requested: user_id=%s, results=%s", user.id, len(users))
    return user_collection_document(users)


@router.get("/{user_id}", response_model=UserDocument)
def show_user(user_id: str, user: User = Depends(authenticate_user)):
    """
    Return the caller's own record. The path id is accepted but not used for
    lookup.
    """
    return user_document(user)
