"""API dependencies.

Dependency injection factories for services and configuration.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings, get_settings
from app.db.session import get_db_session
from app.services.message import MessageService
from app.services.s3 import S3Service

DBSession = Annotated[AsyncSession, Depends(get_db_session)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_message_service(db: DBSession) -> MessageService:
    """Create MessageService instance with database session."""
    return MessageService(db)


def get_s3_service(settings: SettingsDep) -> S3Service:
    """Create S3Service bound to the configured bucket.

    The service is cheap; the boto3 client behind it is shared across requests.
    """
    return S3Service(settings)


MessageSvc = Annotated[MessageService, Depends(get_message_service)]
S3Svc = Annotated[S3Service, Depends(get_s3_service)]
