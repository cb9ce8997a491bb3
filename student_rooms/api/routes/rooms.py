# student_rooms/api/routes/rooms.py

import logging

from fastapi import APIRouter, Depends

from student_rooms.api.binding import json_body
from student_rooms.core.state import get_room_store
from student_rooms.models.models import (
    CreateDoubtRequest,
    CreateRoomRequest,
    DoubtListResponse,
    DoubtResponse,
    JoinRoomRequest,
    JoinRoomResponse,
    PostListResponse,
    RoomListResponse,
    RoomResponse,
)
from student_rooms.services.room_store import RoomStore

logger = logging.getLogger(__name__)

router = APIRouter()

JOIN_MESSAGE = "Joined room successfully!"

# ============================================================================
# ROOM ENDPOINTS
# ============================================================================

@router.get("/rooms", response_model=RoomListResponse)
async def list_rooms(store: RoomStore = Depends(get_room_store)):
    """
    List all rooms in the order they were created.

    Returns:
        RoomListResponse: {"rooms": [...]}, empty list when none exist
    """
    return RoomListResponse(rooms=store.list_rooms())

@router.post("/rooms", response_model=RoomResponse)
async def create_room(
    request: CreateRoomRequest = Depends(json_body(CreateRoomRequest)),
    store: RoomStore = Depends(get_room_store),
):
    """
    Create a new room.

    Missing or null fields default to "". Duplicate names and invite codes are
    accepted.

    Args:
        request: CreateRoomRequest with name, inviteCode

    Returns:
        RoomResponse: {"room": {...}} with the created room
    """
    room = store.create_room(name=request.name, invite_code=request.invite_code)
    return RoomResponse(room=room)

@router.post("/rooms/join", response_model=JoinRoomResponse)
async def join_room(request: JoinRoomRequest = Depends(json_body(JoinRoomRequest))):
    """
    Join a room by invite code.

    No lookup happens and no membership is recorded: every request
    succeeds and echoes the code back, whether or not a room uses it.
    """
    logger.debug("Join requested with invite code %r", request.invite_code)
    return JoinRoomResponse(message=JOIN_MESSAGE, invite_code=request.invite_code)

# ============================================================================
# POSTS & DOUBTS
# ============================================================================

@router.get("/rooms/{room_id}/posts", response_model=PostListResponse)
async def list_posts(room_id: str, store: RoomStore = Depends(get_room_store)):
    """
    Posts attached to a room id.

    Unknown room ids are not an error, they simply have no posts.
    """
    return PostListResponse(posts=store.list_posts(room_id))

@router.post("/rooms/{room_id}/doubts", response_model=DoubtResponse)
async def create_doubt(
    room_id: str,
    request: CreateDoubtRequest = Depends(json_body(CreateDoubtRequest)),
    store: RoomStore = Depends(get_room_store),
):
    """
    Ask a doubt in a room.

    The room id is taken as-is from the path; it does not have to match a
    created room.

    Args:
        room_id: Grouping key for the doubt
        request: CreateDoubtRequest with title, content

    Returns:
        DoubtResponse: {"roomId": ..., "doubt": {...}}
    """
    doubt = store.add_doubt(room_id, title=request.title, content=request.content)
    return DoubtResponse(room_id=room_id, doubt=doubt)

@router.get("/rooms/{room_id}/doubts", response_model=DoubtListResponse)
async def list_doubts(room_id: str, store: RoomStore = Depends(get_room_store)):
    """Doubts asked in a room, oldest first. Empty for unknown room ids."""
    return DoubtListResponse(doubts=store.list_doubts(room_id))
