"""FastAPI application entrypoint. No business logic; only wiring, logging and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tasktracker.api.v1 import router as v1_router
from tasktracker.core.config import settings
from tasktracker.services.task_store import InMemoryTaskStore

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)

app = FastAPI(
    title="Task Tracker API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Used only when TASK_STORE_BACKEND=memory; lives as long as the app.
app.state.memory_task_store = InMemoryTaskStore()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(v1_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Task Tracker API"}
