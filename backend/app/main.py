"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from app.config import get_settings
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.routers import chat_messages, info

logger = logging.getLogger(__name__)


def _prepare_backend_state() -> None:
    """Create tables when configured and prime the DB connection at process start."""

    try:
        if get_settings().create_schema_on_startup:
            Base.metadata.create_all(engine)
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Backend warm-up failed; continuing without startup schema setup.")


@asynccontextmanager
async def lifespan(_: FastAPI):
    _prepare_backend_state()
    yield


app = FastAPI(title=get_settings().app_name, version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chat_messages.router, tags=["messages"])
app.include_router(info.router, tags=["info"])


@app.get("/health")
def health() -> dict[str, str]:
    """Simple health check endpoint."""

    return {"status": "ok"}
