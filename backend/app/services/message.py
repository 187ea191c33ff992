"""Board message service (async SQLAlchemy).

Contains business logic for listing and posting board messages.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import BadRequestError, DatabaseError
from app.core.utils import utc_now_iso
from app.db.models.message import BoardMessage
from app.repositories import message_repo
from app.schemas.message import MessageCreate, MessageRead

logger = logging.getLogger(__name__)


def ensure_board_id(board_id: str | None) -> str:
    """Return the board id, or raise if it is missing.

    Raises:
        BadRequestError: If the board id is empty.
    """
    if not board_id:
        raise BadRequestError(message="Missing board ID.", details={"field": "board_id"})
    return board_id


class MessageService:
    """Service for board message business logic."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_messages(self, board_id: str) -> list[MessageRead]:
        """List all messages of a board, newest first.

        An unknown board is simply an empty one.

        Raises:
            BadRequestError: If the board id is empty.
            DatabaseError: If the query fails.
        """
        board_id = ensure_board_id(board_id)
        try:
            rows = await message_repo.get_messages_by_board(self.db, board_id)
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch messages for board %r", board_id)
            raise DatabaseError(message="Failed to fetch messages.") from e
        return [MessageRead.model_validate(row) for row in rows]

    async def post_message(self, board_id: str, data: MessageCreate) -> BoardMessage:
        """Create a message and, when given, its attachment row.

        Both inserts share one transaction: the attachment insert is issued
        only after the message insert returned an id, and nothing is committed
        unless both succeed.

        Raises:
            BadRequestError: If the board id is empty.
            DatabaseError: If either insert or the commit fails.
        """
        board_id = ensure_board_id(board_id)
        now = utc_now_iso()
        attachment = data.attachment

        try:
            message = await message_repo.create_message(
                self.db,
                board_id=board_id,
                content=data.content,
                created_at=now,
                has_attachment=attachment is not None,
            )
            if message.id is None:
                await self.db.rollback()
                logger.error("Message insert for board %r returned no id", board_id)
                raise DatabaseError(message="Failed to create message.")

            if attachment is not None:
                await message_repo.create_attachment(
                    self.db,
                    message_id=message.id,
                    r2_key=attachment.r2_key,
                    filename=attachment.filename,
                    uploaded_at=now,
                )

            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.exception("Failed to post message to board %r", board_id)
            raise DatabaseError(message="Failed to post message.") from e

        logger.info(
            "Posted message %s to board %r (attachment=%s)",
            message.id,
            board_id,
            attachment is not None,
        )
        return message
