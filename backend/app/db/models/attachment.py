"""Board attachment model for storing object storage references with messages."""

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlmodel import Field

from app.db.base import Base


class BoardAttachment(Base, table=True):
    """BoardAttachment model - metadata of a file attached to a message.

    The bytes themselves live in object storage; only the key is kept here.

    Attributes:
        id: Database-assigned identifier
        message_id: The message this attachment belongs to (one-to-one)
        r2_key: Object storage key issued by the upload broker
        filename: Original filename as sent by the client (unsanitized)
        uploaded_at: ISO-8601 UTC timestamp, same as the message's created_at
    """

    __tablename__ = "board_attachment"

    id: int | None = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
    )
    message_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("board_messages.id"),
            nullable=False,
            index=True,
        ),
    )
    r2_key: str = Field(sa_column=Column(Text, nullable=False))
    filename: str = Field(sa_column=Column(Text, nullable=False))
    uploaded_at: str = Field(sa_column=Column(Text, nullable=False))

    def __repr__(self) -> str:
        return f"<BoardAttachment(id={self.id}, message_id={self.message_id})>"
