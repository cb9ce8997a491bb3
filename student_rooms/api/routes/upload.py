# student_rooms/api/routes/upload.py

import logging

from fastapi import APIRouter, File, UploadFile

from student_rooms.models.models import UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter()

UPLOAD_MESSAGE = "File uploaded successfully"

@router.post("/upload", response_model=UploadResponse)
async def upload_file(file: UploadFile = File(...)):
    """
    Accept a single multipart file field named "file".

    The content is discarded; nothing is written anywhere. A request
    without the field is rejected with 400 by the validation handler.

    Returns:
        UploadResponse: success message and the client-supplied filename
    """
    filename = file.filename or ""
    logger.info("📎 Received upload %r (%s)", filename, file.content_type)
    await file.close()
    return UploadResponse(message=UPLOAD_MESSAGE, filename=filename)
