"""
Token issuance and validation.

Tokens are opaque random strings handed to the client once. Only a SHA-256
digest is stored; a token is looked up by its client id and compared in
constant time.
"""
from dataclasses import dataclass
from typing import Mapping, Optional
import hashlib
import hmac
import logging
import secrets
import time

from sqlalchemy.orm import Session

from .config import settings
from .credentials import find_user_by_email, normalize_email, verify_secret
from .errors import InvalidSecret, MissingCredentials, NotFound, Unauthorized
from .models import AuthToken, User

logger = logging.getLogger(__name__)

ACCESS_TOKEN_HEADER = "access-token"
CLIENT_HEADER = "client"
UID_HEADER = "uid"
EXPIRY_HEADER = "expiry"
TOKEN_TYPE_HEADER = "token-type"
TOKEN_HEADERS = (ACCESS_TOKEN_HEADER, TOKEN_TYPE_HEADER, CLIENT_HEADER, EXPIRY_HEADER, UID_HEADER)


@dataclass(frozen=True)
class IssuedToken:
    user: User
    client_id: str
    token_value: str
    expiry: Optional[int]

    def headers(self) -> dict:
        """Response headers the client replays on every authenticated request."""
        return {
            ACCESS_TOKEN_HEADER: self.token_value,
            TOKEN_TYPE_HEADER: "Bearer",
            CLIENT_HEADER: self.client_id,
            EXPIRY_HEADER: "" if self.expiry is None else str(self.expiry),
            UID_HEADER: self.user.email,
        }


def hash_token(token_value: str) -> str:
    return hashlib.sha256(token_value.encode("utf-8")).hexdigest()


def _now() -> int:
    return int(time.time())


def issue_token(db: Session, email: str, secret: str) -> IssuedToken:
    """
    Check credentials and mint a new token for a fresh client id.

    Tokens previously issued to the same user stay valid; expired ones are
    purged.

    Raises:
        MissingCredentials: If email or secret is empty
        NotFound: If no user has this email
        InvalidSecret: If the secret does not verify
    """
    if not email or not normalize_email(email) or not secret:
        raise MissingCredentials("email and password are required")

    user = find_user_by_email(email, db)
    if not user:
        raise NotFound("no user for email")
    if not verify_secret(secret, user.password):
        raise InvalidSecret("secret mismatch")

    now = _now()
    db.query(AuthToken).filter(
        AuthToken.user_id == user.id,
        AuthToken.expiry.isnot(None),
        AuthToken.expiry <= now
    ).delete(synchronize_session=False)

    lifespan = settings.TOKEN_LIFESPAN_SECONDS
    token_value = secrets.token_urlsafe(32)
    client_id = secrets.token_urlsafe(16)
    expiry = now + lifespan if lifespan > 0 else None

    db.add(AuthToken(
        user_id=user.id,
        client_id=client_id,
        token_hash=hash_token(token_value),
        expiry=expiry
    ))
    db.commit()
    db.refresh(user)

    logger.info("Token issued: user_id=%s, client_id=%s, expiry=%s", user.id, client_id, expiry)
    return IssuedToken(user=user, client_id=client_id, token_value=token_value, expiry=expiry)


def _find_token(db: Session, headers: Mapping[str, str]) -> AuthToken:
    lowered = {key.lower(): value for key, value in headers.items()}
    token_value = lowered.get(ACCESS_TOKEN_HEADER)
    client_id = lowered.get(CLIENT_HEADER)
    uid = lowered.get(UID_HEADER)

    if not token_value or not client_id:
        raise MissingCredentials("access-token and client headers are required")

    query = db.query(AuthToken).filter(AuthToken.client_id == client_id)
    if uid:
        query = query.join(User).filter(User.email == normalize_email(uid))

    digest = hash_token(token_value)
    for token in query.all():
        if hmac.compare_digest(token.token_hash, digest):
            break
    else:
        raise Unauthorized("unknown token")

    if token.is_expired(_now()):
        raise Unauthorized("token expired")
    return token


def validate_token(db: Session, headers: Mapping[str, str]) -> User:
    """
    Resolve request headers to the user the token is bound to.

    Read-only: repeated calls with the same token return the same user.

    Raises:
        MissingCredentials: If the access-token or client header is absent
        Unauthorized: If the token is unknown, bound to another uid, or expired
    """
    return _find_token(db, headers).user


def revoke_token(db: Session, headers: Mapping[str, str]) -> User:
    """
    Delete the token presented in headers. Other clients of the same user are
    not affected.
    """
    token = _find_token(db, headers)
    user, client_id = token.user, token.client_id
    db.delete(token)
    db.commit()
    logger.info("Token revoked: user_id=%s, client_id=%s", user.id, client_id)
    return user
