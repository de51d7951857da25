"""Google Drive implementation of the FilePublisher interface."""

import io
import logging
import threading
from collections.abc import Callable
from typing import Any

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.http import MediaIoBaseUpload

from smart_minutes.domain.models import PublishedFile
from smart_minutes.exceptions import PublishError

from .interfaces import FilePublisher

logger = logging.getLogger(__name__)

DRIVE_SCOPES = ["https://www.googleapis.com/auth/drive"]

SHARE_URL_TEMPLATE = "https://drive.google.com/file/d/{file_id}/view?usp=sharing"


def build_drive_service(service_account_file: str) -> Any:
    """
    Builds a Drive API v3 service authenticated as a service account.

    Args:
        service_account_file: Path to the service account JSON key.

    Returns:
        Drive API Resource object.
    """
    credentials = service_account.Credentials.from_service_account_file(
        service_account_file,
        scopes=DRIVE_SCOPES,
    )
    return build("drive", "v3", credentials=credentials, cache_discovery=False)


class GoogleDrivePublisher(FilePublisher):
    """
    Uploads documents into a Drive folder and shares them by link.

    Drive service objects are not thread-safe, so each publishing thread
    builds and keeps its own through ``service_factory``.

    Args:
        service_factory: Zero-argument callable returning a Drive v3 service.
        folder_id: Destination folder of every published file.
    """

    def __init__(self, service_factory: Callable[[], Any], folder_id: str):
        self._service_factory = service_factory
        self._folder_id = folder_id
        self._local = threading.local()

    def _service(self) -> Any:
        service = getattr(self._local, "service", None)
        if service is None:
            service = self._service_factory()
            self._local.service = service
        return service

    def publish(self, data: bytes, file_name: str, mime_type: str) -> PublishedFile:
        """
        Uploads a file, then grants read access to anyone with the link.

        When the permission grant fails the fresh upload is deleted again, so
        a failed publish does not leave a private file behind. If that delete
        fails as well, the orphaned file id is logged.

        Raises:
            PublishError: If the upload or the permission grant fails.
        """
        service = self._service()

        try:
            created = (
                service.files()
                .create(
                    body={
                        "name": file_name,
                        "mimeType": mime_type,
                        "parents": [self._folder_id],
                    },
                    media_body=MediaIoBaseUpload(
                        io.BytesIO(data), mimetype=mime_type, resumable=False
                    ),
                    fields="id",
                )
                .execute()
            )
        except Exception as e:
            logger.exception(
                "Drive upload failed",
                extra={"file_name": file_name, "folder_id": self._folder_id},
            )
            raise PublishError(file_name, e) from e

        file_id = created["id"]

        try:
            service.permissions().create(
                fileId=file_id,
                body={"role": "reader", "type": "anyone"},
            ).execute()
        except Exception as e:
            logger.exception(
                "Drive permission grant failed",
                extra={"file_name": file_name, "file_id": file_id},
            )
            self._discard(service, file_id, file_name)
            raise PublishError(file_name, e) from e

        url = SHARE_URL_TEMPLATE.format(file_id=file_id)
        logger.info(
            "Document published",
            extra={"file_name": file_name, "file_id": file_id, "url": url},
        )
        return PublishedFile(file_id=file_id, url=url)

    def _discard(self, service: Any, file_id: str, file_name: str) -> None:
        try:
            service.files().delete(fileId=file_id).execute()
            logger.info(
                "Unshared upload removed",
                extra={"file_name": file_name, "file_id": file_id},
            )
        except Exception:
            logger.exception(
                "Unshared upload could not be removed and is orphaned",
                extra={"file_name": file_name, "file_id": file_id},
            )

    def verify_folder_access(self) -> list[str]:
        """
        Lists the destination folder to prove the service account can use it.

        Returns:
            Names of the files currently in the folder.
        """
        response = (
            self._service()
            .files()
            .list(q=f"'{self._folder_id}' in parents", fields="files(id, name)")
            .execute()
        )
        names = [f["name"] for f in response.get("files", [])]
        logger.info(
            "Drive folder accessible",
            extra={"folder_id": self._folder_id, "file_count": len(names)},
        )
        return names
