"""Handler accepting uploaded meeting recordings."""

import io
import logging
from datetime import datetime, timezone

from smart_minutes.domain.models import AudioAsset
from smart_minutes.domain.naming import DEFAULT_AUDIO_FILE_NAME, build_storage_key
from smart_minutes.exceptions import InvalidInputError
from smart_minutes.infrastructure.interfaces import StorageClient

logger = logging.getLogger(__name__)

AUDIO_CONTENT_TYPE = "audio/mpeg"


class AudioIngestionHandler:
    """Validates an upload and writes it to durable storage."""

    def __init__(self, storage: StorageClient, bucket_name: str):
        self._storage = storage
        self._bucket_name = bucket_name

    def ingest(
        self, payload: bytes | None, file_name: str | None, owner_id: str | None
    ) -> AudioAsset:
        """
        Stores one recording for its owner.

        Args:
            payload: Raw audio bytes.
            file_name: Name of the file as uploaded.
            owner_id: The uploading user.

        Returns:
            AudioAsset pointing at the stored object.

        Raises:
            InvalidInputError: If the payload or owner is missing.
            StorageUploadError: If the storage write fails.
        """
        if not payload:
            raise InvalidInputError("audio", "audio payload is missing or empty")
        if not owner_id or not owner_id.strip():
            raise InvalidInputError("uid", "user identifier is missing")

        original_file_name = file_name or DEFAULT_AUDIO_FILE_NAME
        uploaded_at = datetime.now(timezone.utc)
        object_name = build_storage_key(owner_id, original_file_name, uploaded_at)

        reference = self._storage.upload(
            bucket_name=self._bucket_name,
            object_name=object_name,
            data=io.BytesIO(payload),
            size=len(payload),
            content_type=AUDIO_CONTENT_TYPE,
        )

        logger.info(
            "Audio ingested",
            extra={
                "owner_id": owner_id,
                "file_name": original_file_name,
                "storage_uri": reference.uri,
                "size": len(payload),
            },
        )
        return AudioAsset(
            owner_id=owner_id,
            original_file_name=original_file_name,
            storage_reference=reference,
            uploaded_at=uploaded_at,
        )
