"""Password hashing, JWT issuance and the current-user dependency."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import bcrypt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from planner.config import settings
from planner.database import get_db
from planner.errors import AuthenticationError
from planner.models.user import User

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10

bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a token identifying ``user``; defaults to ACCESS_TOKEN_EXPIRE_HOURS."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS)
    )
    claims = {"sub": user.user_id, "username": user.username, "exp": expire}
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        logger.warning("JWT verification failed: %s", e)
        raise AuthenticationError("Invalid token") from e


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the bearer token to a User or fail with 401."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("No token provided")

    claims = decode_access_token(credentials.credentials)
    user = db.query(User).filter(User.user_id == claims.get("sub")).first()
    if not user:
        logger.warning("Token for unknown user %s", claims.get("sub"))
        raise AuthenticationError("Invalid token")
    return user
