"""Repositories - database access layer."""

from app.repositories import message as message_repo

__all__ = ["message_repo"]
