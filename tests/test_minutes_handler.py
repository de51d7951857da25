"""Tests for the summarize, render, publish and record stages."""

import io

import pytest
from conftest import FakeLLM, FakePublisher, _make_minutes_handler
from docx import Document

from smart_minutes.exceptions import (
    InvalidInputError,
    NoSpeechDetectedError,
    PublishError,
    SummarizationError,
)

TRANSCRIPT = "Speaker A:\nLet us approve the budget.\n\nSpeaker B:\nAgreed."


def test_successful_run_records_all_three_links(minutes_handler, publisher, minutes_repository):
    result = minutes_handler.process("u1", TRANSCRIPT, "meeting.mp3")

    assert [link.template_name for link in result.published] == [
        "Template-Formal",
        "Template-Simple",
        "Template-Detailed",
    ]
    assert set(result.record.links) == {
        "formal_template",
        "simple_template",
        "detailed_template",
    }
    assert all(result.record.links.values())
    assert len(publisher.files) == 3
    assert minutes_repository.list_for_owner("u1") == [result.record]


def test_document_names_follow_audio_and_template(minutes_handler, publisher):
    minutes_handler.process("u1", TRANSCRIPT, "meeting.mp3")

    names = sorted(name for name, _, _ in publisher.files.values())
    assert names[0].startswith("meeting-Template-Detailed-")
    assert names[1].startswith("meeting-Template-Formal-")
    assert names[2].startswith("meeting-Template-Simple-")
    assert all(name.endswith(".docx") for name in names)


def test_published_documents_hold_one_paragraph_per_line(minutes_handler, publisher):
    minutes_handler.process("u1", TRANSCRIPT, "meeting.mp3")

    _, data, _ = next(iter(publisher.files.values()))
    paragraphs = [p.text for p in Document(io.BytesIO(data)).paragraphs]
    assert paragraphs[0] == "MINUTES"
    assert paragraphs[-1] == "End of minutes"


def test_missing_audio_name_uses_default(minutes_handler, publisher):
    result = minutes_handler.process("u1", TRANSCRIPT, None)

    assert result.record.audio_file_name == "Transcription"
    assert all(
        name.startswith("Transcription-") for name, _, _ in publisher.files.values()
    )


def test_failing_template_records_nothing(session_factory, minutes_repository):
    publisher = FakePublisher()
    handler = _make_minutes_handler(
        session_factory, llm=FakeLLM(fail_on=("detailed Minutes",)), publisher=publisher
    )

    with pytest.raises(SummarizationError) as exc_info:
        handler.process("u1", TRANSCRIPT, "meeting.mp3")

    assert exc_info.value.template_name == "Template-Detailed"
    assert publisher.files == {}
    assert minutes_repository.list_for_owner("u1") == []


def test_failing_publish_records_nothing(session_factory, minutes_repository):
    handler = _make_minutes_handler(
        session_factory, publisher=FakePublisher(fail_on=("Template-Simple",))
    )

    with pytest.raises(PublishError):
        handler.process("u1", TRANSCRIPT, "meeting.mp3")

    assert minutes_repository.list_for_owner("u1") == []


def test_empty_transcript_is_rejected(minutes_handler, llm):
    with pytest.raises(NoSpeechDetectedError):
        minutes_handler.process("u1", "  ", "meeting.mp3")

    assert llm.prompts == []


def test_blank_owner_is_rejected(minutes_handler, llm):
    with pytest.raises(InvalidInputError):
        minutes_handler.process("", TRANSCRIPT, "meeting.mp3")

    assert llm.prompts == []
