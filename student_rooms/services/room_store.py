# student_rooms/services/room_store.py

from __future__ import annotations

from typing import Any, Dict, List
import logging

from student_rooms.models.models import Doubt, Post, Room

logger = logging.getLogger(__name__)

# ============================================================================
# IN-MEMORY ROOM STORE
# ============================================================================

class RoomStore:
    """
    Holds every room, post and doubt for the lifetime of the process.

    Nothing is persisted: a restart (or a new RoomStore) starts empty.
    Rooms have no identifier of their own, their position in ``rooms`` is
    their identity. Posts and doubts are grouped by a caller-supplied
    room id that is never checked against ``rooms``.

    Attributes:
        rooms: Rooms in creation order
        posts: Maps room_id -> posts in insertion order
        doubts: Maps room_id -> doubts in insertion order

    Concurrency:
        No locks are taken. Every method is a synchronous read or append,
        so handlers running on a single event loop never interleave inside
        one. Separate worker processes each hold their own store.

    Usage:
        store = RoomStore()
        store.create_room("Physics", "PHY101")
        store.add_doubt("0", "Units?", "Why joules?")
        store.list_doubts("0")
    """

    def __init__(self) -> None:
        """Start with three empty collections."""
        self.rooms: List[Room] = []
        self.posts: Dict[str, List[Post]] = {}
        self.doubts: Dict[str, List[Doubt]] = {}

    # ------------------------------------------------------------------
    # Rooms
    # ------------------------------------------------------------------

    def create_room(self, name: str = "", invite_code: str = "") -> Room:
        """
        Append a new room to the end of the room list.

        Args:
            name: Room name, may be empty
            invite_code: Invite code, may be empty

        Returns:
            Room: The newly created room

        Note:
            Neither name nor invite code has to be unique.
        """
        room = Room(name=name, invite_code=invite_code)
        self.rooms.append(room)
        logger.info("✓ Created room %r (%d total)", room.name, len(self.rooms))
        return room

    def list_rooms(self) -> List[Room]:
        """Return all rooms in creation order."""
        return list(self.rooms)

    # ------------------------------------------------------------------
    # Posts
    # ------------------------------------------------------------------

    def add_post(self, room_id: str, post: Post | Dict[str, Any]) -> Post:
        """
        Attach a post to a room id. There is no HTTP route for this.

        Args:
            room_id: Grouping key, need not name an existing room
            post: Post, or a plain dict of its fields

        Returns:
            Post: The stored post, with room_id set to ``room_id``
        """
        if isinstance(post, Post):
            data = post.model_dump(by_alias=True)
        else:
            data = dict(post)
        data["roomId"] = room_id
        data.pop("room_id", None)
        stored = Post.model_validate(data)
        self.posts.setdefault(room_id, []).append(stored)
        return stored

    def list_posts(self, room_id: str) -> List[Post]:
        """Posts for ``room_id``, or an empty list when it has none."""
        return list(self.posts.get(room_id, []))

    # ------------------------------------------------------------------
    # Doubts
    # ------------------------------------------------------------------

    def add_doubt(self, room_id: str, title: str = "", content: str = "") -> Doubt:
        """
        Append a doubt to the sequence kept for ``room_id``.

        The sequence is created on first use. ``room_id`` is not checked
        against the room list.

        Returns:
            Doubt: The newly created doubt
        """
        doubt = Doubt(title=title, content=content)
        self.doubts.setdefault(room_id, []).append(doubt)
        logger.info("✓ Doubt %r added to room %s", doubt.title, room_id)
        return doubt

    def list_doubts(self, room_id: str) -> List[Doubt]:
        """Doubts for ``room_id``, or an empty list when it has none."""
        return list(self.doubts.get(room_id, []))

    def counts(self) -> Dict[str, int]:
        """Summary sizes, used for logs and the service info route."""
        return {
            "rooms": len(self.rooms),
            "rooms_with_posts": len(self.posts),
            "rooms_with_doubts": len(self.doubts),
        }
