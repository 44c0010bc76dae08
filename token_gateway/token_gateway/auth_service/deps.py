from fastapi import Depends, Request
from sqlalchemy.orm import Session

from .db import get_db
from .models import User
from .tokens import validate_token


def authenticate_user(request: Request, db: Session = Depends(get_db)) -> User:
    """
    Gate for protected routes: resolve the token headers to a User.

    AuthenticationError propagates to the application handler, which answers
    401 before any route body runs.
    """
    return validate_token(db, request.headers)
