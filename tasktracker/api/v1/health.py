"""Health check endpoint with database connectivity check for the SQL task store."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tasktracker.core.config import get_settings
from tasktracker.core.database import check_db_connected, get_db
from tasktracker.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """
    Return service health, the task storage backend, and database connectivity.
    The database is only probed when tasks are stored in it.
    """
    settings = get_settings()
    db_status = None
    if settings.TASK_STORE_BACKEND == "sql":
        db_status = "connected" if check_db_connected(db) else "disconnected"

    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        task_store=settings.TASK_STORE_BACKEND,
        database=db_status,
    )
