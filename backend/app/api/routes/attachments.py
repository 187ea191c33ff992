"""Attachment broker routes for direct object storage access.

Provides endpoints for:
- Getting a presigned PUT URL under a fresh board-scoped key
- Getting a presigned GET URL for an existing key

Neither endpoint touches the database. The download broker performs no
ownership check: anyone holding a key can read the object.
"""

from fastapi import APIRouter, Query

from app.api.deps import S3Svc, SettingsDep
from app.schemas.attachment import (
    PresignedDownloadResponse,
    PresignedUploadRequest,
    PresignedUploadResponse,
)
from app.services.s3 import build_attachment_key

router = APIRouter()


@router.post("/upload", response_model=PresignedUploadResponse)
async def get_presigned_upload_url(
    request: PresignedUploadRequest,
    s3: S3Svc,
    settings: SettingsDep,
) -> PresignedUploadResponse:
    """Get a presigned PUT URL for uploading one file straight to storage.

    The returned ``r2Key`` must be sent back when posting the message that
    references the file.
    """
    r2_key = build_attachment_key(
        request.board_id,
        request.file_name,
        prefix=settings.ATTACHMENT_KEY_PREFIX,
    )
    presigned_url = s3.generate_presigned_upload_url(r2_key, request.content_type)
    return PresignedUploadResponse(presigned_url=presigned_url, r2_key=r2_key)


@router.get("/download", response_model=PresignedDownloadResponse)
async def get_presigned_download_url(
    s3: S3Svc,
    key: str = Query(..., min_length=1, description="Storage key of the attachment"),
) -> PresignedDownloadResponse:
    """Get a presigned GET URL for an attachment."""
    presigned_url = s3.generate_presigned_download_url(key)
    return PresignedDownloadResponse(presigned_url=presigned_url)
