"""FastAPI application entry point."""
import logging
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from planner.config import settings
from planner.database import Base, engine, get_db
from planner.errors import PlannerError

# Import routers
from planner.routers import auth, users, contacts, events, invitations, reminders

# Import all models so Base.metadata knows about them
from planner.models.user import User                 # noqa: F401
from planner.models.contact import Contact           # noqa: F401
from planner.models.event import Event               # noqa: F401
from planner.models.invitation import EventInvitation  # noqa: F401
from planner.models.reminder import EventReminder    # noqa: F401

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Event Planner",
    description="Personal event planning: contacts, events, invitations, RSVPs and reminders",
    version="0.1.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(auth.router, prefix="/api", tags=["Auth"])
app.include_router(users.router, prefix="/api/users", tags=["Users"])
app.include_router(contacts.router, prefix="/api/contacts", tags=["Contacts"])
app.include_router(events.router, prefix="/api/events", tags=["Events"])
app.include_router(invitations.router, prefix="/api/events", tags=["Invitations"])
app.include_router(reminders.router, prefix="/api", tags=["Reminders"])


@app.exception_handler(PlannerError)
async def planner_error_handler(request: Request, exc: PlannerError):
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return JSONResponse(exc.to_dict(), status_code=exc.status_code)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error while processing %s %s", request.method, request.url.path)
    return JSONResponse({"detail": "Internal server error"}, status_code=500)


@app.on_event("startup")
def on_startup():
    """Create database tables on startup (for SQLite dev mode)."""
    if settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check(db: Session = Depends(get_db)):
    """Liveness plus a round trip to the database."""
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Health check failed: %s", e)
        return JSONResponse(
            {"status": "unhealthy", "database": "error", "timestamp": timestamp},
            status_code=503,
        )
    return {"status": "healthy", "database": "connected", "timestamp": timestamp}
