"""S3-compatible object storage access (Cloudflare R2).

Only presigned URL issuance is used: file bytes travel directly between the
client and the bucket, never through this service.
"""

import logging
import uuid
from functools import lru_cache

from boto3 import client
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from app.core.config import Settings
from app.core.exceptions import StorageConfigurationError, StorageError

logger = logging.getLogger(__name__)


def build_attachment_key(board_id: str, file_name: str, prefix: str = "board_attachments") -> str:
    """Build a unique storage key for a board attachment.

    A fresh UUID sits between the board and the filename so the same filename
    can be uploaded any number of times without overwriting earlier objects.
    """
    return f"{prefix}/{board_id}/{uuid.uuid4()}/{file_name}"


@lru_cache(maxsize=8)
def get_s3_client(endpoint_url: str, access_key_id: str, secret_access_key: str, region: str):
    """Build a boto3 S3 client, shared by every request using the same credentials.

    Raises:
        StorageConfigurationError: If botocore rejects the endpoint URL.
    """
    try:
        return client(
            "s3",
            endpoint_url=endpoint_url,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
            region_name=region,
            config=Config(signature_version="s3v4"),
        )
    except ValueError as e:
        logger.error("Invalid object storage endpoint %r: %s", endpoint_url, e)
        raise StorageConfigurationError(
            message="Object storage endpoint is invalid",
            details={"invalid": ["R2_S3_ENDPOINT"]},
        ) from e


class S3Service:
    """Issues presigned URLs for one bucket.

    The boto3 client is looked up on first use so that missing configuration is
    reported when a broker is actually called, not at startup.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def bucket(self) -> str:
        if not self.settings.BUCKET_NAME:
            raise StorageConfigurationError(details={"missing": ["BUCKET_NAME"]})
        return self.settings.BUCKET_NAME

    @property
    def s3_client(self):
        missing = self.settings.missing_storage_settings()
        if missing:
            logger.error("Object storage is not configured, missing: %s", ", ".join(missing))
            raise StorageConfigurationError(details={"missing": missing})
        return get_s3_client(
            self.settings.R2_S3_ENDPOINT,
            self.settings.R2_ACCESS_KEY_ID,
            self.settings.R2_SECRET_ACCESS_KEY,
            self.settings.R2_REGION,
        )

    def generate_presigned_upload_url(
        self,
        object_name: str,
        content_type: str,
        expiration: int | None = None,
    ) -> str:
        """Generate a presigned PUT URL for one object

        :param object_name: S3 object name
        :param content_type: MIME type the uploader must send
        :param expiration: Time in seconds for the presigned URL to remain valid
        :return: Presigned URL as string
        """
        s3_client = self.s3_client
        try:
            return s3_client.generate_presigned_url(
                "put_object",
                Params={"Bucket": self.bucket, "Key": object_name, "ContentType": content_type},
                ExpiresIn=expiration or self.settings.PRESIGNED_URL_EXPIRATION,
            )
        except (BotoCoreError, ClientError) as e:
            logger.exception("Error generating presigned upload URL for %r", object_name)
            raise StorageError(message="Failed to generate upload URL.") from e

    def generate_presigned_download_url(self, object_name: str, expiration: int | None = None) -> str:
        """Generate a presigned GET URL for one object

        Does not check that the object exists.

        :param object_name: S3 object name
        :param expiration: Time in seconds for the presigned URL to remain valid
        :return: Presigned URL as string
        """
        s3_client = self.s3_client
        try:
            return s3_client.generate_presigned_url(
                "get_object",
                Params={"Bucket": self.bucket, "Key": object_name},
                ExpiresIn=expiration or self.settings.PRESIGNED_URL_EXPIRATION,
            )
        except (BotoCoreError, ClientError) as e:
            logger.exception("Error generating presigned download URL for %r", object_name)
            raise StorageError(message="Failed to generate download URL.") from e
