"""User API routes."""
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from planner.auth import get_current_user
from planner.database import get_db
from planner.models.user import User
from planner.schemas.user import UserCreate, UserOut
from planner.services import user_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    """Register a new user. Usernames are unique (409 on collision)."""
    return user_service.register_user(db, **payload.model_dump())


@router.get("/", response_model=list[UserOut])
def list_users(db: Session = Depends(get_db), _: User = Depends(get_current_user)):
    """List all users (authenticated)."""
    return db.query(User).order_by(User.username).all()


@router.get("/me", response_model=UserOut)
def get_me(user: User = Depends(get_current_user)):
    """The user the bearer token belongs to."""
    return user
