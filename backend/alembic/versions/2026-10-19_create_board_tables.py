"""create board_messages and board_attachment tables

Revision ID: 3f9c1d2e7a40
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f9c1d2e7a40"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "board_messages",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("board_id", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_at", sa.Text(), nullable=False),
        sa.Column("has_attachment", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("board_messages_board_id_idx", "board_messages", ["board_id"])

    op.create_table(
        "board_attachment",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "message_id",
            sa.Integer(),
            sa.ForeignKey("board_messages.id"),
            nullable=False,
        ),
        sa.Column("r2_key", sa.Text(), nullable=False),
        sa.Column("filename", sa.Text(), nullable=False),
        sa.Column("uploaded_at", sa.Text(), nullable=False),
    )
    op.create_index("board_attachment_message_id_idx", "board_attachment", ["message_id"])


def downgrade() -> None:
    op.drop_index("board_attachment_message_id_idx", table_name="board_attachment")
    op.drop_table("board_attachment")
    op.drop_index("board_messages_board_id_idx", table_name="board_messages")
    op.drop_table("board_messages")
