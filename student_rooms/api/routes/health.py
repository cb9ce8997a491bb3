# student_rooms/api/routes/health.py

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

@router.get("/health", response_class=PlainTextResponse)
async def health():
    """
    Health check endpoint.

    Always answers 200 with the plain text body "OK". Touches no state.
    """
    return "OK"
