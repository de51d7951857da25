"""Core business logic for multi-template summarization."""

import hashlib
import logging
from collections.abc import Sequence

from smart_minutes.concurrency import BranchFailedError, run_branches
from smart_minutes.exceptions import LLMServiceError, SummarizationError
from smart_minutes.infrastructure.interfaces import CacheService, LLMService

from .models import GeneratedSummary, TemplateSpec

logger = logging.getLogger(__name__)


class SummarizationOrchestrator:
    """Generates one summary per template, all templates concurrently."""

    def __init__(
        self,
        llm_service: LLMService,
        cache_service: CacheService,
        timeout_seconds: float | None,
    ):
        self._llm = llm_service
        self._cache = cache_service
        self._timeout_seconds = timeout_seconds

    def summarize(
        self, transcript: str, templates: Sequence[TemplateSpec]
    ) -> list[GeneratedSummary]:
        """
        Summarizes a transcript with every template.

        Every template is attempted on its own thread. The call only succeeds
        when all of them succeed; results of templates that finished before a
        failure are discarded.

        Args:
            transcript: The corrected transcript text.
            templates: Templates to generate, in output order.

        Returns:
            One GeneratedSummary per template, in template order.

        Raises:
            SummarizationError: For the first template (in template order)
                that failed or did not finish within the timeout.
        """
        branches = [
            lambda template=template: self._summarize_one(transcript, template)
            for template in templates
        ]

        try:
            summaries = run_branches(
                branches, timeout=self._timeout_seconds, name="summarize"
            )
        except BranchFailedError as e:
            template = templates[e.index]
            logger.error(
                "Summarization failed",
                extra={"template": template.name, "error": str(e.cause)},
            )
            raise SummarizationError(template.name, e.cause) from e.cause

        logger.info("All templates summarized", extra={"template_count": len(summaries)})
        return summaries

    def _summarize_one(self, transcript: str, template: TemplateSpec) -> GeneratedSummary:
        prompt = template.build_prompt(transcript)
        digest = hashlib.sha256(prompt.encode("utf-8")).hexdigest()
        cache_key = f"summary:{template.db_field}:{digest}"

        cached = self._cache.get(cache_key)
        if cached:
            logger.info("Summary retrieved from cache", extra={"template": template.name})
            return GeneratedSummary(template=template, text=cached)

        text = self._llm.generate(prompt)
        if not text.strip():
            raise LLMServiceError(f"Empty summary for template '{template.name}'")

        self._cache.set(cache_key, text)
        logger.info("Summary generated", extra={"template": template.name})
        return GeneratedSummary(template=template, text=text)
