"""Board message repository (async SQLAlchemy).

Contains only database operations. Validation, timestamps and transaction
boundaries are handled by MessageService in app/services/message.py.
"""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.attachment import BoardAttachment
from app.db.models.message import BoardMessage


async def get_messages_by_board(db: AsyncSession, board_id: str) -> list[dict[str, Any]]:
    """Get every message of a board, newest first, joined with its attachment.

    Args:
        db: Database session
        board_id: Board identifier, matched verbatim

    Returns:
        One flat dict per message. Attachment columns are None when the
        message has no attachment row.
    """
    query = (
        select(
            BoardMessage.id,
            BoardMessage.board_id,
            BoardMessage.content,
            BoardMessage.created_at,
            BoardMessage.has_attachment,
            BoardAttachment.r2_key,
            BoardAttachment.filename,
            BoardAttachment.uploaded_at,
        )
        .outerjoin(BoardAttachment, BoardAttachment.message_id == BoardMessage.id)
        .where(BoardMessage.board_id == board_id)
        .order_by(BoardMessage.created_at.desc(), BoardMessage.id.desc())
    )
    result = await db.execute(query)
    return [dict(row) for row in result.mappings().all()]


async def create_message(
    db: AsyncSession,
    *,
    board_id: str,
    content: str,
    created_at: str,
    has_attachment: bool,
) -> BoardMessage:
    """Insert a message row and flush it so the generated id is available.

    Note: does not commit.
    """
    message = BoardMessage(
        board_id=board_id,
        content=content,
        created_at=created_at,
        has_attachment=has_attachment,
    )
    db.add(message)
    await db.flush()
    return message


async def create_attachment(
    db: AsyncSession,
    *,
    message_id: int,
    r2_key: str,
    filename: str,
    uploaded_at: str,
) -> BoardAttachment:
    """Insert the attachment row of a message.

    Note: does not commit.
    """
    attachment = BoardAttachment(
        message_id=message_id,
        r2_key=r2_key,
        filename=filename,
        uploaded_at=uploaded_at,
    )
    db.add(attachment)
    await db.flush()
    return attachment
