import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from student_rooms.core.state import get_room_store
from student_rooms.main import app
from student_rooms.services.room_store import RoomStore


@pytest.fixture
def store():
    return RoomStore()


@pytest_asyncio.fixture
async def api_client(store):
    app.dependency_overrides[get_room_store] = lambda: store
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client
    finally:
        app.dependency_overrides.pop(get_room_store, None)
