"""Tests for board message routes.

Covers listing, posting, attachment metadata, validation and database failure
handling against an in-memory SQLite database.
"""

from unittest.mock import AsyncMock, patch

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.api.deps import get_message_service
from app.db.models import BoardAttachment, BoardMessage
from app.main import app


async def _count(session_maker: async_sessionmaker[AsyncSession], model) -> int:
    async with session_maker() as session:
        result = await session.execute(select(func.count()).select_from(model))
        return result.scalar_one()


class TestListMessages:
    """Tests for GET /api/messages/{board_id}."""

    @pytest.mark.anyio
    async def test_list_empty_board(self, client: AsyncClient):
        """A board nobody posted to is an empty list, not an error."""
        response = await client.get("/api/messages/never-used")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.anyio
    async def test_post_then_list(self, client: AsyncClient):
        """Posting 'hello' to demo makes it show up without an attachment."""
        response = await client.post("/api/messages/demo", json={"content": "hello"})
        assert response.status_code == 201

        response = await client.get("/api/messages/demo")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["content"] == "hello"
        assert data[0]["board_id"] == "demo"
        assert data[0]["has_attachment"] is False
        assert data[0]["r2_key"] is None
        assert data[0]["filename"] is None
        assert data[0]["created_at"].endswith("Z")

    @pytest.mark.anyio
    async def test_list_returns_newest_first(self, client: AsyncClient):
        """N posts come back as exactly N records in reverse posting order."""
        for i in range(5):
            response = await client.post("/api/messages/ordered", json={"content": f"m{i}"})
            assert response.status_code == 201

        response = await client.get("/api/messages/ordered")

        data = response.json()
        assert [m["content"] for m in data] == ["m4", "m3", "m2", "m1", "m0"]
        timestamps = [m["created_at"] for m in data]
        assert timestamps == sorted(timestamps, reverse=True)

    @pytest.mark.anyio
    async def test_boards_are_isolated(self, client: AsyncClient):
        """Messages of one board never leak into another."""
        await client.post("/api/messages/alpha", json={"content": "a"})
        await client.post("/api/messages/beta", json={"content": "b"})

        alpha = (await client.get("/api/messages/alpha")).json()
        beta = (await client.get("/api/messages/beta")).json()

        assert [m["content"] for m in alpha] == ["a"]
        assert [m["content"] for m in beta] == ["b"]

    @pytest.mark.anyio
    async def test_board_id_keeps_slashes(self, client: AsyncClient):
        """Every segment after /messages/ belongs to the board id."""
        response = await client.post("/api/messages/team/general", json={"content": "hi"})
        assert response.status_code == 201

        data = (await client.get("/api/messages/team/general")).json()

        assert len(data) == 1
        assert data[0]["board_id"] == "team/general"
        assert (await client.get("/api/messages/team")).json() == []

    @pytest.mark.anyio
    async def test_list_database_failure(self, client: AsyncClient):
        """A failing query becomes a generic 500 without internal detail."""
        error = OperationalError("SELECT", {}, Exception("disk I/O error"))
        with patch(
            "app.repositories.message.get_messages_by_board",
            AsyncMock(side_effect=error),
        ):
            response = await client.get("/api/messages/demo")

        assert response.status_code == 500
        body = response.json()
        assert body["error"]["code"] == "DATABASE_ERROR"
        assert "disk I/O error" not in response.text


class TestPostMessage:
    """Tests for POST /api/messages/{board_id}."""

    @pytest.mark.anyio
    async def test_post_returns_created(self, client: AsyncClient):
        response = await client.post("/api/messages/demo", json={"content": "hello"})

        assert response.status_code == 201
        assert response.json() == {"message": "Message posted successfully!"}

    @pytest.mark.anyio
    async def test_post_with_attachment(
        self,
        client: AsyncClient,
        session_maker: async_sessionmaker[AsyncSession],
    ):
        """An attachment creates exactly one linked attachment row."""
        r2_key = "board_attachments/demo/0b7c3f1e-0000-4000-8000-000000000000/a.txt"
        response = await client.post(
            "/api/messages/demo",
            json={"content": "see file", "attachment": {"r2Key": r2_key, "filename": "a.txt"}},
        )
        assert response.status_code == 201

        async with session_maker() as session:
            messages = (await session.execute(select(BoardMessage))).scalars().all()
            attachments = (await session.execute(select(BoardAttachment))).scalars().all()

        assert len(messages) == 1
        assert messages[0].has_attachment is True
        assert len(attachments) == 1
        assert attachments[0].message_id == messages[0].id
        assert attachments[0].r2_key == r2_key
        assert attachments[0].uploaded_at == messages[0].created_at

        data = (await client.get("/api/messages/demo")).json()
        assert data[0]["has_attachment"] is True
        assert data[0]["r2_key"] == r2_key
        assert data[0]["filename"] == "a.txt"
        assert data[0]["uploaded_at"] == data[0]["created_at"]

    @pytest.mark.anyio
    async def test_content_is_stored_verbatim(self, client: AsyncClient):
        """Compressed/base64 payloads are opaque to the server."""
        payload = "H4sIAAAAAAAAA8tIzcnJBwCGphA2BQAAAA=="
        await client.post("/api/messages/demo", json={"content": payload})

        data = (await client.get("/api/messages/demo")).json()

        assert data[0]["content"] == payload

    @pytest.mark.anyio
    @pytest.mark.parametrize(
        "body",
        [
            {"content": ""},
            {},
            {"content": 42},
            {"content": None},
        ],
    )
    async def test_invalid_content_rejected(
        self,
        client: AsyncClient,
        session_maker: async_sessionmaker[AsyncSession],
        body: dict,
    ):
        """Empty, absent or non-string content is a 400 and stores nothing."""
        response = await client.post("/api/messages/demo", json=body)

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert any(e["field"] == "body.content" for e in error["details"]["errors"])
        assert await _count(session_maker, BoardMessage) == 0

    @pytest.mark.anyio
    @pytest.mark.parametrize(
        ("attachment", "missing_field"),
        [
            ({"filename": "a.txt"}, "body.attachment.r2Key"),
            ({"r2Key": "board_attachments/demo/x/a.txt"}, "body.attachment.filename"),
        ],
    )
    async def test_incomplete_attachment_rejected(
        self,
        client: AsyncClient,
        session_maker: async_sessionmaker[AsyncSession],
        attachment: dict,
        missing_field: str,
    ):
        """A partial attachment object is rejected before any insert."""
        response = await client.post(
            "/api/messages/demo",
            json={"content": "hello", "attachment": attachment},
        )

        assert response.status_code == 400
        fields = [e["field"] for e in response.json()["error"]["details"]["errors"]]
        assert missing_field in fields
        assert await _count(session_maker, BoardMessage) == 0
        assert await _count(session_maker, BoardAttachment) == 0

    @pytest.mark.anyio
    async def test_malformed_json_rejected(self, client: AsyncClient):
        response = await client.post(
            "/api/messages/demo",
            content=b'{"content": "unterminated',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.anyio
    async def test_attachment_insert_failure_rolls_back(
        self,
        client: AsyncClient,
        session_maker: async_sessionmaker[AsyncSession],
    ):
        """If the attachment insert fails the message is not left behind."""
        error = IntegrityError("INSERT", {}, Exception("constraint failed"))
        with patch(
            "app.repositories.message.create_attachment",
            AsyncMock(side_effect=error),
        ):
            response = await client.post(
                "/api/messages/demo",
                json={"content": "hello", "attachment": {"r2Key": "k", "filename": "f"}},
            )

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "DATABASE_ERROR"
        assert await _count(session_maker, BoardMessage) == 0
        assert (await client.get("/api/messages/demo")).json() == []


class TestMissingBoardId:
    """Requests that do not name a board."""

    @pytest.mark.anyio
    @pytest.mark.parametrize("path", ["/api/messages", "/api/messages/"])
    async def test_get_without_board_id(self, client: AsyncClient, path: str):
        response = await client.get(path)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Missing board ID."

    @pytest.mark.anyio
    @pytest.mark.parametrize("path", ["/api/messages", "/api/messages/"])
    async def test_post_without_board_id(
        self,
        client: AsyncClient,
        session_maker: async_sessionmaker[AsyncSession],
        path: str,
    ):
        response = await client.post(path, json={"content": "hello"})

        assert response.status_code == 400
        assert await _count(session_maker, BoardMessage) == 0


class TestMethodNotAllowed:
    @pytest.mark.anyio
    @pytest.mark.parametrize("method", ["PUT", "DELETE", "PATCH"])
    async def test_unsupported_method(self, client: AsyncClient, method: str):
        response = await client.request(method, "/api/messages/demo")

        assert response.status_code == 405


class TestUnexpectedFailure:
    """Errors outside the domain hierarchy reach the catch-all handler."""

    @pytest.mark.anyio
    async def test_unexpected_error_is_internal_error(self):
        service = AsyncMock()
        service.list_messages.side_effect = RuntimeError("connection string postgres://secret")
        app.dependency_overrides[get_message_service] = lambda: service

        try:
            async with AsyncClient(
                transport=ASGITransport(app=app, raise_app_exceptions=False),
                base_url="http://test",
            ) as client:
                response = await client.get("/api/messages/demo")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "INTERNAL_ERROR"
        assert error["message"] == "Internal server error"
        assert "postgres://secret" not in response.text
        service.list_messages.assert_awaited_once_with("demo")
