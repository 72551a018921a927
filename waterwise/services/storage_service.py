"""
Avatar storage in MinIO / S3 compatible object storage.
"""

import logging
import uuid
from typing import BinaryIO, Optional

from minio import Minio
from minio.error import S3Error

from waterwise.core.config import settings
from waterwise.core.exceptions import ExternalServiceException

logger = logging.getLogger(__name__)


class StorageService:
    """Service for interacting with MinIO object storage."""

    def __init__(self, client: Optional[Minio] = None):
        self.client = client or Minio(
            endpoint=settings.minio_url,
            access_key=settings.minio_access_key,
            secret_key=settings.minio_secret_key,
            secure=settings.minio_secure,
        )

    @staticmethod
    def avatar_object_name(user_id: str, filename: str) -> str:
        """``avatars/<user>-<random>.<ext>`` so every upload gets a fresh URL."""
        extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else "bin"
        return f"avatars/{user_id}-{uuid.uuid4().hex}.{extension}"

    @staticmethod
    def public_url(bucket_name: str, object_name: str) -> str:
        return f"{settings.storage_public_url.rstrip('/')}/{bucket_name}/{object_name}"

    def ensure_bucket(self, bucket_name: str) -> None:
        if not self.client.bucket_exists(bucket_name):
            self.client.make_bucket(bucket_name)
            logger.info(f"Created bucket {bucket_name}")

    def upload_avatar(
        self,
        user_id: str,
        filename: str,
        data: BinaryIO,
        length: int,
        content_type: str = "application/octet-stream",
    ) -> str:
        """
        Upload an avatar image and return its public URL.
        """
        bucket_name = settings.avatar_bucket
        object_name = self.avatar_object_name(user_id, filename)
        try:
            self.ensure_bucket(bucket_name)
            result = self.client.put_object(
                bucket_name=bucket_name,
                object_name=object_name,
                data=data,
                length=length,
                content_type=content_type,
            )
        except S3Error as e:
            logger.error(f"Error uploading avatar for {user_id}: {e}")
            raise ExternalServiceException(message="Failed to upload avatar")

        logger.info(f"Uploaded {object_name} to {bucket_name}, etag: {result.etag}")
        return self.public_url(bucket_name, object_name)


def get_storage_service() -> StorageService:
    return StorageService()
