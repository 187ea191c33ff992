"""Board message schemas."""

from pydantic import Field

from app.schemas.base import BaseSchema


class AttachmentRef(BaseSchema):
    """Reference to an object already uploaded through the upload broker."""

    r2_key: str = Field(alias="r2Key", description="Storage key returned by the upload broker")
    filename: str = Field(description="Original filename to show to readers")


class MessageCreate(BaseSchema):
    """Body of ``POST /api/messages/{board_id}``."""

    content: str = Field(
        min_length=1,
        description="Message payload; may be compressed/encoded by the client",
    )
    attachment: AttachmentRef | None = Field(default=None, description="Optional attachment")


class MessageRead(BaseSchema):
    """A message as returned by the list endpoint, flattened with its attachment."""

    id: int
    board_id: str
    content: str
    created_at: str = Field(description="ISO-8601 UTC creation time")
    has_attachment: bool
    r2_key: str | None = Field(default=None, description="Attachment storage key")
    filename: str | None = Field(default=None, description="Attachment filename")
    uploaded_at: str | None = Field(default=None, description="Attachment ISO-8601 timestamp")


class MessageCreated(BaseSchema):
    """Response for a successfully posted message."""

    message: str = "Message posted successfully!"
