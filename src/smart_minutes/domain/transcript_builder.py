"""Core business logic for transcript building."""

from collections.abc import Sequence

from .models import RecognizedWord, SpeakerSegment

UNKNOWN_SPEAKER = "unknown"


class TranscriptBuilder:
    """Builds speaker-labeled transcripts from word-level recognition output."""

    def build(
        self, words: Sequence[RecognizedWord]
    ) -> tuple[str, list[SpeakerSegment]]:
        """
        Groups recognized words into speaker segments and formats them.

        A new segment starts whenever the speaker tag differs from the
        previous word's tag, so a speaker who talks twice gets two segments.

        Args:
            words: Recognized words in time order.

        Returns:
            Tuple of (transcript_text, speaker_segments). Both are empty when
            no words were recognized.
        """
        segments = self._segment(words)
        return self._format(segments), segments

    def _segment(self, words: Sequence[RecognizedWord]) -> list[SpeakerSegment]:
        segments: list[SpeakerSegment] = []
        current_speaker: str | None = None
        current_words: list[str] = []

        for word in words:
            text = word.text.strip()
            if not text:
                continue
            speaker = word.speaker or UNKNOWN_SPEAKER
            if current_words and speaker != current_speaker:
                segments.append(
                    SpeakerSegment(speaker=current_speaker, text=" ".join(current_words))
                )
                current_words = []
            current_speaker = speaker
            current_words.append(text)

        if current_words:
            segments.append(
                SpeakerSegment(speaker=current_speaker, text=" ".join(current_words))
            )
        return segments

    def _format(self, segments: list[SpeakerSegment]) -> str:
        """Formats segments as 'Speaker X:' headers followed by their words."""
        return "\n\n".join(f"Speaker {s.speaker}:\n{s.text}" for s in segments).strip()
