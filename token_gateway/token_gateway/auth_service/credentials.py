from passlib.context import CryptContext
from sqlalchemy.orm import Session
from typing import Optional

from .models import User

# Use pbkdf2_sha256 to avoid external bcrypt backend issues in some environments
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def normalize_email(email: str) -> str:
    return email.strip().lower()


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_secret(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def find_user_by_email(email: str, db: Session) -> Optional[User]:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def create_user(email: str, password: str, db: Session, name: Optional[str] = None) -> User:
    """
    Store a new user with a hashed secret.

    Args:
        email: Login email, normalized before storage
        password: Plaintext secret
        db: Database session
        name: Display name

    Returns:
        The persisted User

    Raises:
        ValueError: If the email is empty or already taken
    """
    email = normalize_email(email)
    if not email:
        raise ValueError("email must not be empty")
    if find_user_by_email(email, db):
        raise ValueError(f"email already registered: {email}")

    user = User(email=email, name=name, password=hash_password(password))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
