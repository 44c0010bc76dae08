"""
Auth Router - sign in, token validation and sign out.
"""
import logging
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..db import get_db
from ..errors import AuthenticationError, InvalidSecret
from ..credentials import find_user_by_email
from ..schemas import ErrorResponse, SignInRequest, SignOutResponse, UserDocument, ValidateTokenResponse
from ..serializers import serialize_user, user_document
from ..tokens import issue_token, revoke_token, validate_token
from ..utils.event_logger import log_auth_event

router = APIRouter(prefix="/auth", tags=["auth"], responses={401: {"model": ErrorResponse}})
logger = logging.getLogger(__name__)

INVALID_LOGIN = "Invalid login credentials. Please try again."
INVALID_TOKEN = "Invalid login credentials"


def _rejected(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"success": False, "errors": [message]}
    )


@router.post("/sign_in", response_model=UserDocument)
def sign_in(credentials: SignInRequest, request: Request, response: Response, db: Session = Depends(get_db)):
    try:
        issued = issue_token(db, credentials.email, credentials.password)
    except AuthenticationError as exc:
        logger.info("Sign in rejected: reason=%s", exc.reason)
        if isinstance(exc, InvalidSecret):
            user = find_user_by_email(credentials.email, db)
            if user:
                log_auth_event("login_failure", user, request, db)
        return _rejected(INVALID_LOGIN)

    log_auth_event("login_success", issued.user, request, db, metadata={"client_id": issued.client_id})
    response.headers.update(issued.headers())
    return user_document(issued.user)


@router.get("/validate_token", response_model=ValidateTokenResponse)
def check_token(request: Request, db: Session = Depends(get_db)):
    try:
        user = validate_token(db, request.headers)
    except AuthenticationError as exc:
        logger.info("Token validation rejected: reason=%s", exc.reason)
        return _rejected(INVALID_TOKEN)
    return {"success": True, "data": serialize_user(user)}


@router.delete("/sign_out", response_model=SignOutResponse)
def sign_out(request: Request, db: Session = Depends(get_db)):
    user = revoke_token(db, request.headers)
    log_auth_event("logout", user, request, db)
    return {"success": True}
