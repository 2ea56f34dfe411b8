import logging
import os
import uuid
from abc import ABC, abstractmethod
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.core.config import settings
from app.core.errors import BackendError, ConfigurationError

logger = logging.getLogger(__name__)


class StorageBackend(ABC):
    """Abstract base class for storage backends"""

    @abstractmethod
    async def save_file(self, file_content: bytes, filename: str, content_type: str = "application/octet-stream") -> str:
        """Save file and return its storage key"""
        pass

    @abstractmethod
    async def delete_file(self, file_path: str) -> bool:
        """Delete file"""
        pass

    @abstractmethod
    def get_public_url(self, file_path: str) -> str:
        """Permanent URL for a publicly readable file"""
        pass


class LocalStorageBackend(StorageBackend):
    """Local filesystem storage backend"""

    def __init__(self, base_path: str = "uploads", public_url: str = "/files"):
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)
        self.public_url = public_url.rstrip("/")

    async def save_file(self, file_content: bytes, filename: str, content_type: str = "application/octet-stream") -> str:
        """Save file to local filesystem"""
        file_path = self.base_path / filename
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, 'wb') as f:
            f.write(file_content)

        return str(file_path.relative_to(self.base_path).as_posix())

    async def delete_file(self, file_path: str) -> bool:
        """Delete file from local filesystem"""
        full_path = self.base_path / file_path
        if not full_path.exists():
            return False
        try:
            full_path.unlink()
        except OSError:
            logger.exception("Could not delete %s", full_path)
            return False
        return True

    def get_public_url(self, file_path: str) -> str:
        return f"{self.public_url}/{file_path}"


class S3StorageBackend(StorageBackend):
    """Amazon S3 storage backend"""

    def __init__(self, bucket_name: str, access_key: str, secret_key: str, region: str = "us-east-1"):
        self.bucket_name = bucket_name
        self.region = region
        self.client = boto3.client(
            's3',
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            region_name=region
        )

    async def save_file(self, file_content: bytes, filename: str, content_type: str = "application/octet-stream") -> str:
        """Save file to S3"""
        try:
            self.client.put_object(
                Bucket=self.bucket_name,
                Key=filename,
                Body=file_content,
                ContentType=content_type
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("Failed to upload %s to S3: %s", filename, e)
            raise BackendError("Error uploading file") from e
        return filename

    async def delete_file(self, file_path: str) -> bool:
        """Delete file from S3"""
        try:
            self.client.delete_object(Bucket=self.bucket_name, Key=file_path)
        except (BotoCoreError, ClientError) as e:
            logger.error("Failed to delete %s from S3: %s", file_path, e)
            return False
        return True

    def get_public_url(self, file_path: str) -> str:
        return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com/{file_path}"


class AttachmentStorageService:
    """Stores project files under ``<bucket>/<project_id>/<random name>``"""

    def __init__(self, backend: StorageBackend, bucket: str = "project-files"):
        self.backend = backend
        self.bucket = bucket

    def generate_filename(self, project_id: int, original_name: str) -> str:
        """Random storage name that keeps the original extension"""
        _, ext = os.path.splitext(original_name)
        return f"{self.bucket}/{project_id}/{uuid.uuid4().hex}{ext.lower()}"

    async def save_attachment(
        self, content: bytes, project_id: int, original_name: str, content_type: Optional[str] = None
    ) -> Tuple[str, str]:
        """Upload the file and return (storage key, public URL)"""
        filename = self.generate_filename(project_id, original_name)
        file_path = await self.backend.save_file(content, filename, content_type or "application/octet-stream")
        return file_path, self.backend.get_public_url(file_path)

    async def delete_attachment(self, file_path: str) -> bool:
        return await self.backend.delete_file(file_path)


def create_storage_backend() -> StorageBackend:
    """Create storage backend based on configuration"""
    storage_type = settings.STORAGE_TYPE.lower()

    if storage_type == 's3':
        if not (settings.S3_BUCKET_NAME and settings.S3_ACCESS_KEY and settings.S3_SECRET_KEY):
            raise ConfigurationError("S3 storage selected but S3 credentials are missing")
        return S3StorageBackend(
            bucket_name=settings.S3_BUCKET_NAME,
            access_key=settings.S3_ACCESS_KEY,
            secret_key=settings.S3_SECRET_KEY,
            region=settings.S3_REGION
        )
    return LocalStorageBackend(settings.UPLOAD_DIRECTORY, settings.PUBLIC_FILES_URL)


@lru_cache
def get_attachment_storage() -> AttachmentStorageService:
    """Shared storage service, built on first use"""
    return AttachmentStorageService(create_storage_backend(), settings.STORAGE_BUCKET)
