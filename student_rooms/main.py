# student_rooms/main.py

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from student_rooms.core import state
from student_rooms.core.config import settings
from student_rooms.core.logging import setup_logging, get_logger
from student_rooms.api.errors import install_error_handlers
from student_rooms.api.routes import root, health, rooms, upload

# Configure logging first
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Application starting - in-memory store %s", state.room_store.counts())
    yield
    logger.info("Application stopping - in-memory state discarded")


# FastAPI app
app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION, lifespan=lifespan)

# CORS (all origins by default)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)

# REST routes
app.include_router(root.router)
app.include_router(health.router)
app.include_router(rooms.router)
app.include_router(upload.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("student_rooms.main:app", host=settings.HOST, port=settings.PORT)
