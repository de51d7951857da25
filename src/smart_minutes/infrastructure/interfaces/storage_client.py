"""Abstract interface for object storage operations."""

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import BinaryIO

from smart_minutes.domain.models import StorageReference


class StorageClient(ABC):
    """Abstract base class for object storage backends."""

    @abstractmethod
    def upload(
        self,
        bucket_name: str,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> StorageReference:
        """
        Uploads an object to storage.

        Args:
            bucket_name: The storage bucket name.
            object_name: The destination path/name in storage.
            data: File-like object containing the data.
            size: Size of the data in bytes.
            content_type: MIME type of the data.

        Returns:
            Reference to the stored object.

        Raises:
            StorageUploadError: If the upload fails.
        """
        pass

    @abstractmethod
    def presigned_url(self, reference: StorageReference, expires: timedelta) -> str:
        """
        Creates a time-limited URL granting read access to an object.

        Args:
            reference: The stored object.
            expires: How long the URL stays valid.

        Raises:
            StorageDownloadError: If the URL cannot be created.
        """
        pass

    @abstractmethod
    def ensure_bucket_exists(self, bucket_name: str) -> None:
        """
        Ensures a bucket exists, creating it if necessary.

        Args:
            bucket_name: The bucket name to ensure exists.
        """
        pass
