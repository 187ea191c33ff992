"""Attachment broker schemas for presigned object storage access."""

from pydantic import Field

from app.schemas.base import BaseSchema


class PresignedUploadRequest(BaseSchema):
    """Request for a presigned PUT URL."""

    board_id: str = Field(alias="boardId", min_length=1, description="Board the file belongs to")
    file_name: str = Field(alias="fileName", min_length=1, description="Original filename")
    content_type: str = Field(
        alias="contentType",
        min_length=1,
        description="MIME type the upload will be signed for",
    )


class PresignedUploadResponse(BaseSchema):
    """Presigned PUT URL plus the key to reference when posting the message."""

    presigned_url: str = Field(alias="presignedUrl", description="URL to PUT the file to")
    r2_key: str = Field(alias="r2Key", description="Storage key the file will be written to")


class PresignedDownloadResponse(BaseSchema):
    """Response containing presigned download URL."""

    presigned_url: str = Field(alias="presignedUrl", description="URL to GET the file from")
