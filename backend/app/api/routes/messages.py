"""Board message routes.

The endpoints are:
- GET /messages/{board_id} - List a board's messages, newest first
- POST /messages/{board_id} - Post a message, optionally referencing an attachment

The board id is everything after ``/messages/``, slashes included.
"""

from fastapi import APIRouter, status

from app.api.deps import MessageSvc
from app.core.exceptions import BadRequestError
from app.schemas.message import MessageCreate, MessageCreated, MessageRead

router = APIRouter()


@router.api_route("", methods=["GET", "POST"], include_in_schema=False)
async def missing_board_id():
    """Reject requests that name no board at all."""
    raise BadRequestError(message="Missing board ID.", details={"field": "board_id"})


@router.get("/{board_id:path}", response_model=list[MessageRead])
async def list_messages(board_id: str, message_service: MessageSvc) -> list[MessageRead]:
    """List every message of a board with its attachment metadata.

    Boards are never created explicitly, so an unknown board returns ``[]``.
    """
    return await message_service.list_messages(board_id)


@router.post(
    "/{board_id:path}",
    response_model=MessageCreated,
    status_code=status.HTTP_201_CREATED,
)
async def post_message(
    board_id: str,
    data: MessageCreate,
    message_service: MessageSvc,
) -> MessageCreated:
    """Post a message to a board.

    ``attachment.r2Key`` must be a key previously issued by
    ``POST /attachments/upload``; it is stored as-is.
    """
    await message_service.post_message(board_id, data)
    return MessageCreated()
