"""AssemblyAI implementation of the TranscriptionService interface."""

import logging
import time

import assemblyai as aai

from smart_minutes.domain.models import RecognizedWord
from smart_minutes.exceptions import TranscriptionError

from .interfaces import TranscriptionService

logger = logging.getLogger(__name__)

_FINISHED = (aai.TranscriptStatus.completed, aai.TranscriptStatus.error)


class AssemblyAITranscriber(TranscriptionService):
    """
    Runs diarized transcription jobs on AssemblyAI.

    The job is submitted without blocking and then polled until it completes
    or errors. A job still running when the timeout expires is deleted on the
    AssemblyAI side before the failure is reported, so no job keeps running
    unaccounted for.
    """

    def __init__(
        self,
        transcriber: aai.Transcriber,
        poll_interval_seconds: float,
        timeout_seconds: float,
    ):
        self._transcriber = transcriber
        self._poll_interval_seconds = poll_interval_seconds
        self._timeout_seconds = timeout_seconds

    def transcribe(self, audio_url: str) -> list[RecognizedWord]:
        try:
            transcript = self._transcriber.submit(audio_url)
        except Exception as e:
            logger.exception("AssemblyAI job submission failed")
            raise TranscriptionError(audio_url, e) from e

        logger.info("AssemblyAI job submitted", extra={"transcript_id": transcript.id})

        transcript = self._wait_for_completion(transcript, audio_url)

        if transcript.status == aai.TranscriptStatus.error:
            logger.error(
                "AssemblyAI job failed",
                extra={"transcript_id": transcript.id, "error": transcript.error},
            )
            raise TranscriptionError(audio_url, Exception(transcript.error))

        words = [
            RecognizedWord(text=w.text, speaker=w.speaker, start_ms=w.start)
            for w in transcript.words or []
        ]
        logger.info(
            "Audio transcription successful",
            extra={"transcript_id": transcript.id, "word_count": len(words)},
        )
        return words

    def _wait_for_completion(self, transcript: aai.Transcript, audio_url: str):
        deadline = time.monotonic() + self._timeout_seconds

        while transcript.status not in _FINISHED:
            if time.monotonic() >= deadline:
                self._cancel(transcript.id)
                raise TranscriptionError(
                    audio_url,
                    TimeoutError(
                        f"Job {transcript.id} not finished after "
                        f"{self._timeout_seconds} seconds"
                    ),
                )
            time.sleep(self._poll_interval_seconds)
            try:
                transcript = aai.Transcript.get_by_id(transcript.id)
            except Exception as e:
                logger.exception(
                    "AssemblyAI polling failed", extra={"transcript_id": transcript.id}
                )
                raise TranscriptionError(audio_url, e) from e

        return transcript

    def _cancel(self, transcript_id: str) -> None:
        try:
            aai.Transcript.delete_by_id(transcript_id)
            logger.warning(
                "AssemblyAI job cancelled after timeout",
                extra={"transcript_id": transcript_id},
            )
        except Exception:
            logger.exception(
                "AssemblyAI job could not be cancelled and will run to completion",
                extra={"transcript_id": transcript_id},
            )
