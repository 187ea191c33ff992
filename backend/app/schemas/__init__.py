"""Pydantic schemas."""

from app.schemas.attachment import (
    PresignedDownloadResponse,
    PresignedUploadRequest,
    PresignedUploadResponse,
)
from app.schemas.message import AttachmentRef, MessageCreate, MessageCreated, MessageRead

__all__ = [
    "AttachmentRef",
    "MessageCreate",
    "MessageCreated",
    "MessageRead",
    "PresignedDownloadResponse",
    "PresignedUploadRequest",
    "PresignedUploadResponse",
]
