"""Abstract interface for document rendering."""

from abc import ABC, abstractmethod


class DocumentRenderer(ABC):
    """Abstract base class for summary document formats."""

    mime_type: str
    file_extension: str

    @abstractmethod
    def render(self, text: str, template_name: str) -> bytes:
        """
        Renders summary text into a document, one paragraph per line.

        Args:
            text: The generated summary.
            template_name: Name of the template that produced the summary.

        Returns:
            The serialized document.

        Raises:
            DocumentRenderError: If the document cannot be serialized.
        """
        pass
