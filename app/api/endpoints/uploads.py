"""
Serves files uploaded with job applications.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse, StreamingResponse

from app.core.storage import LocalStorage, StorageBackend, StorageError, get_storage, guess_content_type

router = APIRouter(prefix="/uploads", tags=["Uploads"])
logger = logging.getLogger(__name__)


@router.get("/{filename}")
def get_upload(filename: str, storage: StorageBackend = Depends(get_storage)):
    """
    Return the raw bytes of a stored upload.

    Names that could escape the upload directory are treated as missing.
    """
    if not storage.file_exists(filename):
        raise HTTPException(status_code=404, detail="File not found")

    media_type = guess_content_type(filename)

    if isinstance(storage, LocalStorage):
        return FileResponse(storage.path_for(filename), media_type=media_type)

    try:
        content = storage.download_file(filename)
    except StorageError as e:
        logger.error(f"Failed to read upload {filename}: {e}")
        raise HTTPException(status_code=500, detail="Failed to read file")

    return StreamingResponse(content, media_type=media_type)
