"""Tests for speaker segmentation and transcript formatting."""

from smart_minutes.domain import RecognizedWord, TranscriptBuilder
from smart_minutes.domain.transcript_builder import UNKNOWN_SPEAKER


def _word(text, speaker):
    return RecognizedWord(text=text, speaker=speaker)


def test_alternating_speakers_produce_one_segment_per_turn():
    words = [
        _word("Hello", "A"),
        _word("there.", "A"),
        _word("Hi", "B"),
        _word("back.", "B"),
        _word("Again.", "A"),
    ]

    text, segments = TranscriptBuilder().build(words)

    assert [s.speaker for s in segments] == ["A", "B", "A"]
    assert text.count("Speaker ") == 3
    assert text == "Speaker A:\nHello there.\n\nSpeaker B:\nHi back.\n\nSpeaker A:\nAgain."


def test_no_words_yields_empty_transcript():
    text, segments = TranscriptBuilder().build([])

    assert text == ""
    assert segments == []


def test_blank_words_are_skipped_without_splitting_a_turn():
    words = [_word("One", "A"), _word("  ", "B"), _word("two", "A")]

    text, segments = TranscriptBuilder().build(words)

    assert len(segments) == 1
    assert text == "Speaker A:\nOne two"


def test_missing_speaker_tag_is_labeled_unknown():
    text, segments = TranscriptBuilder().build([_word("Hello", None)])

    assert segments[0].speaker == UNKNOWN_SPEAKER
    assert text.startswith(f"Speaker {UNKNOWN_SPEAKER}:")
