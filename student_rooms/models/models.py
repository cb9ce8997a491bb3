# student_rooms/models/models.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List

# ============================================================================
# RECORDS
# ============================================================================

class Room(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    invite_code: str = Field(default="", alias="inviteCode")

class Post(BaseModel):
    # Posts carry whatever fields their producer attached; only roomId is known
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    room_id: str = Field(alias="roomId")
    title: str = ""
    content: str = ""

class Doubt(BaseModel):
    title: str = ""
    content: str = ""

# ============================================================================
# REQUEST BODIES
# ============================================================================

class RequestBody(BaseModel):
    """JSON request body whose null fields read as missing ones."""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

class CreateRoomRequest(RequestBody):
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    invite_code: str = Field(default="", alias="inviteCode")

class JoinRoomRequest(RequestBody):
    model_config = ConfigDict(populate_by_name=True)

    invite_code: str = Field(default="", alias="inviteCode")

class CreateDoubtRequest(RequestBody):
    title: str = ""
    content: str = ""

# ============================================================================
# RESPONSE ENVELOPES
# ============================================================================

class RoomListResponse(BaseModel):
    rooms: List[Room]

class RoomResponse(BaseModel):
    room: Room

class JoinRoomResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    invite_code: str = Field(alias="inviteCode")

class PostListResponse(BaseModel):
    posts: List[Post]

class DoubtResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    room_id: str = Field(alias="roomId")
    doubt: Doubt

class DoubtListResponse(BaseModel):
    doubts: List[Doubt]

class UploadResponse(BaseModel):
    message: str
    filename: str
