"""User registration and credential checks."""
import logging

import pytz
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from planner.auth import hash_password, verify_password
from planner.errors import AuthenticationError, ConflictError, ValidationError
from planner.models.user import User

logger = logging.getLogger(__name__)


def register_user(
    db: Session,
    first_name: str,
    last_name: str,
    username: str,
    password: str,
    default_timezone: str = "UTC",
) -> User:
    """Create a user with a bcrypt-hashed password. Duplicate usernames → ConflictError."""
    if default_timezone not in pytz.all_timezones_set:
        raise ValidationError(f"Unknown timezone: {default_timezone}")

    user = User(
        first_name=first_name,
        last_name=last_name,
        username=username,
        password_hash=hash_password(password),
        default_timezone=default_timezone,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("Username already exists") from e
    db.refresh(user)
    logger.info("Created user %s (%s)", user.user_id, user.username)
    return user


def authenticate(db: Session, username: str, password: str) -> User:
    user = db.query(User).filter(User.username == username).first()
    if not user:
        logger.warning("Login attempt for unknown username '%s'", username)
        raise AuthenticationError("Username not found")
    if not verify_password(password, user.password_hash):
        logger.warning("Invalid password for user %s", user.user_id)
        raise AuthenticationError("Invalid password")
    return user
