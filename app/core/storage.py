# ============================================================================
# FILE: app/core/storage.py
# S3-compatible object storage for uploaded audio
# ============================================================================
from typing import BinaryIO, Optional
from uuid import uuid4
import logging

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from app.config import settings
from app.core.errors import StorageError, StorageUploadError

logger = logging.getLogger(__name__)

AUDIO_FORMAT = "mp3"
AUDIO_CONTENT_TYPE = "audio/mpeg"

class ObjectStorageClient:
    """
    Wrapper around a boto3 S3 client (works with AWS S3, Cloudflare R2, MinIO).

    Uploads always land under the configured folder with a server-generated
    key; client-supplied filenames are never used for placement.
    """

    def __init__(
        self,
        bucket_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        region: Optional[str] = None,
        public_url: Optional[str] = None,
        folder: Optional[str] = None,
        timeout_seconds: Optional[int] = None,
    ):
        self.bucket_name = bucket_name or settings.STORAGE_BUCKET_NAME
        self.endpoint_url = endpoint_url or settings.STORAGE_ENDPOINT_URL
        self.region = region or settings.STORAGE_REGION
        self.public_url = public_url or settings.STORAGE_PUBLIC_URL
        self.folder = (folder or settings.STORAGE_FOLDER).strip("/")
        timeout = timeout_seconds or settings.STORAGE_TIMEOUT_SECONDS

        if not self.bucket_name:
            raise StorageError("Missing storage configuration: STORAGE_BUCKET_NAME")

        self._client = boto3.client(
            "s3",
            endpoint_url=self.endpoint_url,
            aws_access_key_id=access_key_id or settings.STORAGE_ACCESS_KEY_ID or None,
            aws_secret_access_key=secret_access_key or settings.STORAGE_SECRET_ACCESS_KEY or None,
            region_name=self.region,
            config=Config(
                signature_version="s3v4",
                connect_timeout=timeout,
                read_timeout=timeout,
                # Failures surface to the caller, no retries here
                retries={"total_max_attempts": 1, "mode": "standard"},
            ),
        )

        logger.info(f"Object storage initialized: bucket={self.bucket_name}, folder={self.folder}")

    def generate_object_key(self) -> str:
        """<folder>/<uuid>.mp3"""
        return f"{self.folder}/{uuid4().hex}.{AUDIO_FORMAT}"

    def public_url_for(self, object_key: str) -> str:
        if self.public_url:
            return f"{self.public_url.rstrip('/')}/{object_key}"
        if self.endpoint_url:
            return f"{self.endpoint_url.rstrip('/')}/{self.bucket_name}/{object_key}"
        return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com/{object_key}"

    def upload_audio(self, fileobj: BinaryIO) -> str:
        """
        Stream an audio payload to the bucket and return its public URL.

        Raises:
            StorageUploadError: if the storage service rejects or fails the upload
        """
        object_key = self.generate_object_key()
        try:
            self._client.upload_fileobj(
                fileobj,
                self.bucket_name,
                object_key,
                ExtraArgs={"ContentType": AUDIO_CONTENT_TYPE},
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Upload to storage failed: key={object_key}, error={e}")
            raise StorageUploadError(object_key, str(e)) from e

        logger.info(f"Uploaded audio to storage: key={object_key}")
        return self.public_url_for(object_key)

    def close(self):
        self._client.close()
