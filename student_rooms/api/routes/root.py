# student_rooms/api/routes/root.py

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from student_rooms.core import state
from student_rooms.core.config import settings
from student_rooms.services.room_store import RoomStore

router = APIRouter()


@router.get("/")
async def root(store: RoomStore = Depends(state.get_room_store)):
    """
    Root endpoint - API information.

    Returns basic info about the API, its routes and how much is in memory.
    """
    uptime_seconds = (datetime.now(timezone.utc) - state.app_start_time).total_seconds()
    return {
        "message": "Student Rooms Backend is running!",
        "version": settings.APP_VERSION,
        "uptime_seconds": round(uptime_seconds, 1),
        "endpoints": {
            "rooms": "/rooms",
            "join": "/rooms/join",
            "posts": "/rooms/{roomId}/posts",
            "doubts": "/rooms/{roomId}/doubts",
            "upload": "/upload",
            "health": "/health",
        },
        "stats": store.counts(),
    }
