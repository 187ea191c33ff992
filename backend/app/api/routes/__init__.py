"""API router aggregation."""

from fastapi import APIRouter

from app.api.routes import attachments, health, messages

api_router = APIRouter()

# Health check routes
api_router.include_router(health.router, tags=["health"])

# Board message routes
api_router.include_router(messages.router, prefix="/messages", tags=["messages"])

# Presigned attachment upload/download routes
api_router.include_router(attachments.router, prefix="/attachments", tags=["attachments"])
