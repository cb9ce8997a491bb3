# student_rooms/core/state.py
from __future__ import annotations

from datetime import datetime, timezone

from student_rooms.services.room_store import RoomStore

# Global singleton for app state
room_store = RoomStore()

app_start_time: datetime = datetime.now(timezone.utc)


def get_room_store() -> RoomStore:
    """FastAPI dependency returning the process-wide store."""
    return room_store
