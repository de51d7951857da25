"""Handler producing, publishing and recording the minutes of one meeting."""

import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from smart_minutes.concurrency import BranchFailedError, run_branches
from smart_minutes.domain.models import (
    GeneratedSummary,
    MinutesRunResult,
    PublishedLink,
    SummaryArtifact,
    TemplateSpec,
)
from smart_minutes.domain.naming import DEFAULT_DOCUMENT_BASE_NAME, build_document_name
from smart_minutes.domain.summarizer import SummarizationOrchestrator
from smart_minutes.exceptions import (
    InvalidInputError,
    NoSpeechDetectedError,
    PipelineError,
    PublishError,
)
from smart_minutes.infrastructure.interfaces import DocumentRenderer, FilePublisher
from smart_minutes.repositories import MinutesRepository

logger = logging.getLogger(__name__)


class MinutesHandler:
    """
    Runs the per-template half of the pipeline for one transcript.

    Stages are joined in order: every summary is generated before any
    document is rendered, and every document is published before the record
    is written. A failure at any point ends the run without a record.
    """

    def __init__(
        self,
        orchestrator: SummarizationOrchestrator,
        renderer: DocumentRenderer,
        publisher: FilePublisher,
        repository: MinutesRepository,
        templates: Sequence[TemplateSpec],
        publish_timeout_seconds: float | None,
    ):
        self._orchestrator = orchestrator
        self._renderer = renderer
        self._publisher = publisher
        self._repository = repository
        self._templates = tuple(templates)
        self._publish_timeout_seconds = publish_timeout_seconds

    def process(
        self, owner_id: str, transcript_text: str, audio_file_name: str | None
    ) -> MinutesRunResult:
        """
        Summarizes a transcript with every template and records the links.

        Args:
            owner_id: The user the minutes belong to.
            transcript_text: The corrected transcript.
            audio_file_name: Original recording name, used for document names.

        Returns:
            The recorded run and its published links.

        Raises:
            InvalidInputError: If the owner is missing.
            NoSpeechDetectedError: If the transcript is empty.
            SummarizationError: If any template fails to generate.
            DocumentRenderError: If any document fails to render.
            PublishError: If any document fails to publish.
            PersistenceError: If the record cannot be written.
        """
        if not owner_id or not owner_id.strip():
            raise InvalidInputError("user_id", "user identifier is missing")

        audio_name = audio_file_name or DEFAULT_DOCUMENT_BASE_NAME
        if not transcript_text or not transcript_text.strip():
            raise NoSpeechDetectedError(audio_name)

        logger.info(
            "Generating minutes",
            extra={"owner_id": owner_id, "audio_file_name": audio_name},
        )

        summaries = self._orchestrator.summarize(transcript_text, self._templates)
        published = self._publish_all(summaries, audio_name)

        record = self._repository.record(
            owner_id,
            audio_name,
            {link.template_db_field: link.url for link in published},
        )

        logger.info(
            "Minutes completed",
            extra={"owner_id": owner_id, "run_id": str(record.run_id)},
        )
        return MinutesRunResult(record=record, published=published)

    def _publish_all(
        self, summaries: Sequence[GeneratedSummary], audio_name: str
    ) -> list[PublishedLink]:
        branches = [
            lambda summary=summary: self._publish_one(summary, audio_name)
            for summary in summaries
        ]
        try:
            return run_branches(
                branches, timeout=self._publish_timeout_seconds, name="publish"
            )
        except BranchFailedError as e:
            template = summaries[e.index].template
            # Documents already shared by other branches stay published.
            logger.error(
                "Publishing failed, run aborted",
                extra={"template": template.name, "error": str(e.cause)},
            )
            if isinstance(e.cause, PipelineError):
                raise e.cause
            raise PublishError(template.name, e.cause) from e.cause

    def _publish_one(self, summary: GeneratedSummary, audio_name: str) -> PublishedLink:
        template = summary.template
        artifact = SummaryArtifact(
            template_name=template.name,
            generated_text=summary.text,
            document=self._renderer.render(summary.text, template.name),
        )
        file_name = build_document_name(
            audio_name,
            template.name,
            datetime.now(timezone.utc),
            self._renderer.file_extension,
        )
        published = self._publisher.publish(
            artifact.document, file_name, self._renderer.mime_type
        )
        return PublishedLink(
            template_name=template.name,
            template_db_field=template.db_field,
            file_id=published.file_id,
            url=published.url,
        )
