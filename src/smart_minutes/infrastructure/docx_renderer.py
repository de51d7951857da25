"""Word document rendering for generated minutes."""

import io
import logging

from docx import Document

from smart_minutes.exceptions import DocumentRenderError

from .interfaces import DocumentRenderer

logger = logging.getLogger(__name__)

DOCX_MIME_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)


class DocxRenderer(DocumentRenderer):
    """Renders summaries as .docx files with one paragraph per summary line."""

    mime_type = DOCX_MIME_TYPE
    file_extension = ".docx"

    def __init__(self, author: str = "Smart Minutes App"):
        self._author = author

    def render(self, text: str, template_name: str) -> bytes:
        try:
            document = Document()
            properties = document.core_properties
            properties.author = self._author
            properties.title = f"Minutes of the Meeting - {template_name}"
            properties.comments = "Auto-generated summary of transcribed audio."

            for line in text.splitlines() or [""]:
                document.add_paragraph(line)

            buffer = io.BytesIO()
            document.save(buffer)
        except Exception as e:
            logger.exception(
                "Document rendering failed", extra={"template": template_name}
            )
            raise DocumentRenderError(template_name, e) from e

        data = buffer.getvalue()
        logger.info(
            "Document rendered", extra={"template": template_name, "size": len(data)}
        )
        return data
