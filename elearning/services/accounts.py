from __future__ import annotations

import logging
from typing import Optional

from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from elearning.core.errors import DuplicateUsername, InvalidCredentials, OperationFailed, ValidationFailed
from elearning.models.entities import User

log = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

DEFAULT_ROLE = "student"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: Optional[str]) -> bool:
    # rows written before hashing was introduced hold plaintext
    if not hashed or pwd_context.identify(hashed) is None:
        log.warning("[AUTH] stored password is not a recognised hash; refusing login")
        return False
    return pwd_context.verify(plain, hashed)


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def register_user(
    db: Session,
    username: Optional[str],
    email: Optional[str],
    password: Optional[str],
    role: Optional[str] = None,
) -> User:
    if not _clean(username) or not _clean(email) or not _clean(password):
        raise ValidationFailed("All fields are required")

    user = User(
        username=_clean(username),
        email=_clean(email),
        password_hash=hash_password(password),
        role=_clean(role) or DEFAULT_ROLE,
    )
    try:
        db.add(user)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if "unique" in str(e.orig).lower():
            raise DuplicateUsername() from e
        raise OperationFailed(f"Registration failed: {e.orig}") from e
    except SQLAlchemyError as e:
        db.rollback()
        raise OperationFailed(f"Registration failed: {e}") from e
    db.refresh(user)
    log.info("[AUTH] registered user %s (%s)", user.username, user.role)
    return user


def authenticate_user(db: Session, username: str, password: str) -> User:
    try:
        user = db.scalar(select(User).where(User.username == username))
        matched = user is not None and verify_password(password, user.password_hash)
    except (SQLAlchemyError, ValueError) as e:
        # ValueError: stored hash is malformed
        raise OperationFailed(f"Login error: {e}") from e
    if not matched:
        log.warning("[AUTH] failed login for %r", username)
        raise InvalidCredentials()
    return user
