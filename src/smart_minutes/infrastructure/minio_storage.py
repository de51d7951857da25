"""MinIO implementation of the StorageClient interface."""

import logging
from datetime import timedelta
from typing import BinaryIO

from minio import Minio

from smart_minutes.domain.models import StorageReference
from smart_minutes.exceptions import StorageDownloadError, StorageUploadError

from .interfaces import StorageClient

logger = logging.getLogger(__name__)


class MinioStorageClient(StorageClient):
    """Handles audio storage operations using MinIO."""

    def __init__(self, client: Minio):
        self._client = client

    def upload(
        self,
        bucket_name: str,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> StorageReference:
        try:
            self._client.put_object(
                bucket_name=bucket_name,
                object_name=object_name,
                data=data,
                length=size,
                content_type=content_type,
            )
        except Exception as e:
            logger.exception(
                "MinIO upload failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageUploadError(object_name, e) from e

        logger.info(
            "File uploaded to MinIO",
            extra={"bucket_name": bucket_name, "object_name": object_name, "size": size},
        )
        return StorageReference(bucket_name=bucket_name, object_name=object_name)

    def presigned_url(self, reference: StorageReference, expires: timedelta) -> str:
        try:
            return self._client.presigned_get_object(
                reference.bucket_name, reference.object_name, expires=expires
            )
        except Exception as e:
            logger.exception(
                "MinIO presigned URL failed",
                extra={
                    "bucket_name": reference.bucket_name,
                    "object_name": reference.object_name,
                },
            )
            raise StorageDownloadError(reference.object_name, e) from e

    def ensure_bucket_exists(self, bucket_name: str) -> None:
        if not self._client.bucket_exists(bucket_name):
            self._client.make_bucket(bucket_name)
            logger.info("Bucket created", extra={"bucket_name": bucket_name})
        else:
            logger.info("Bucket already exists", extra={"bucket_name": bucket_name})
