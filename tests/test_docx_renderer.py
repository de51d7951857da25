"""Tests for .docx rendering."""

import io

import pytest
from docx import Document

from smart_minutes.exceptions import DocumentRenderError
from smart_minutes.infrastructure import DOCX_MIME_TYPE, DocxRenderer


def _paragraphs(data: bytes) -> list[str]:
    return [p.text for p in Document(io.BytesIO(data)).paragraphs]


def test_each_line_becomes_a_paragraph():
    data = DocxRenderer().render("Title\n\n• Item one\n• Item two", "Template-Simple")

    assert _paragraphs(data) == ["Title", "", "• Item one", "• Item two"]


def test_core_properties_are_set():
    data = DocxRenderer(author="Tester").render("Body", "Template-Formal")

    properties = Document(io.BytesIO(data)).core_properties
    assert properties.author == "Tester"
    assert properties.title == "Minutes of the Meeting - Template-Formal"


def test_same_text_renders_same_content():
    renderer = DocxRenderer()

    first = renderer.render("A\nB", "Template-Simple")
    second = renderer.render("A\nB", "Template-Simple")

    assert _paragraphs(first) == _paragraphs(second)


def test_empty_text_renders_single_empty_paragraph():
    assert _paragraphs(DocxRenderer().render("", "Template-Simple")) == [""]


def test_renderer_advertises_docx_format():
    renderer = DocxRenderer()

    assert renderer.mime_type == DOCX_MIME_TYPE
    assert renderer.file_extension == ".docx"


def test_text_that_cannot_be_stored_raises_render_error():
    with pytest.raises(DocumentRenderError) as exc_info:
        DocxRenderer().render("bad \x00 byte", "Template-Detailed")

    assert exc_info.value.template_name == "Template-Detailed"
