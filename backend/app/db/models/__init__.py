"""Database models."""

from app.db.models.attachment import BoardAttachment
from app.db.models.message import BoardMessage

__all__ = ["BoardAttachment", "BoardMessage"]
