"""Abstract interface for publishing documents behind share links."""

from abc import ABC, abstractmethod

from smart_minutes.domain.models import PublishedFile


class FilePublisher(ABC):
    """Abstract base class for file hosting backends."""

    @abstractmethod
    def publish(self, data: bytes, file_name: str, mime_type: str) -> PublishedFile:
        """
        Uploads a file and makes it readable by anyone holding the link.

        Args:
            data: The file contents.
            file_name: Name of the new file.
            mime_type: MIME type of the file.

        Returns:
            The hosted file id and its public share URL.

        Raises:
            PublishError: If the upload or the permission grant fails.
        """
        pass
