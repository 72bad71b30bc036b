# app/services/identity_service.py
"""
Identity: register-or-login by email.

How it works:
  - Known email  → bcrypt check against the stored hash → AUTHENTICATED or UnauthorizedError
  - Unseen email + display name → hash with a fresh salt, insert user → CREATED
  - Unseen email, no name → NotFoundError (client should resubmit with a name)

Concurrent first logins for the same email race on the unique index. The
loser re-reads the winner once and treats it as a normal login.
"""

import enum
from dataclasses import dataclass
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.exceptions import NotFoundError, UnauthorizedError
from app.models.user import User
from app.services.security import hash_password, verify_password
from app.utils.logger import get_logger

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"
NOT_REGISTERED = "User not found. Please register."


class AuthOutcome(str, enum.Enum):
    CREATED = "created"
    AUTHENTICATED = "authenticated"


@dataclass
class AuthResult:
    outcome: AuthOutcome
    user: User


def find_user_by_email(db: Session, email: str) -> Optional[User]:
    """Exact-match lookup. Returns None if no user has this email."""
    return db.query(User).filter(User.email == email).first()


def _check_password(user: User, password: str) -> AuthResult:
    if not verify_password(password, user.password):
        logger.warning(f"Failed login for {user.email}")
        raise UnauthorizedError(INVALID_CREDENTIALS)
    logger.info(f"Login ok: user={user.id}")
    return AuthResult(AuthOutcome.AUTHENTICATED, user)


def authenticate_or_register(db: Session, email: str, password: str,
                             name: Optional[str] = None) -> AuthResult:
    user = find_user_by_email(db, email)
    if user:
        return _check_password(user, password)

    if not name:
        raise NotFoundError(NOT_REGISTERED)

    user = User(name=name, email=email, password=hash_password(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        winner = find_user_by_email(db, email)
        if winner is None:
            raise
        logger.info(f"Registration race on {email}, resolved to existing user={winner.id}")
        return _check_password(winner, password)

    db.refresh(user)
    logger.info(f"Registered user={user.id} email={user.email}")
    return AuthResult(AuthOutcome.CREATED, user)
