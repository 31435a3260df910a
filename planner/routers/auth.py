"""Login route: exchanges credentials for a bearer token."""
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from planner.auth import create_access_token
from planner.database import get_db
from planner.schemas.user import LoginOut, LoginRequest
from planner.services import user_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/login", response_model=LoginOut)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    """Verify username/password and issue a JWT."""
    user = user_service.authenticate(db, payload.username, payload.password)
    token = create_access_token(user)
    logger.info("User %s logged in", user.user_id)
    return {"token": token, "user": user}
