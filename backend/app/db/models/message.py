"""Board message model using SQLModel."""

from sqlalchemy import Boolean, Column, Integer, Text
from sqlmodel import Field

from app.db.base import Base


class BoardMessage(Base, table=True):
    """BoardMessage model - a single post on a board.

    Attributes:
        id: Database-assigned identifier, increasing with insertion order
        board_id: Client-chosen board identifier (no board table exists)
        content: Opaque message payload, possibly compressed by the client
        created_at: Server-assigned ISO-8601 UTC timestamp
        has_attachment: True iff one BoardAttachment row references this message
    """

    __tablename__ = "board_messages"

    id: int | None = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
    )
    board_id: str = Field(sa_column=Column(Text, nullable=False, index=True))
    content: str = Field(sa_column=Column(Text, nullable=False))
    created_at: str = Field(sa_column=Column(Text, nullable=False))
    has_attachment: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, default=False),
    )

    def __repr__(self) -> str:
        return f"<BoardMessage(id={self.id}, board_id={self.board_id})>"
