"""Gemini LLM service implementation."""

import logging

from google import genai

from smart_minutes.exceptions import LLMServiceError

from .interfaces import LLMService

logger = logging.getLogger(__name__)


class GeminiLLMService(LLMService):
    """LLM service implementation using Google Gemini."""

    def __init__(
        self,
        client: genai.Client,
        model_name: str,
        system_prompt: str,
        temperature: float,
    ):
        self._client = client
        self._model_name = model_name
        self._system_prompt = system_prompt
        self._temperature = temperature

    def generate(self, prompt: str) -> str:
        """
        Generates minutes text for a prompt with Gemini.

        The system instruction and temperature are fixed per service so every
        template is generated under the same role.

        Raises:
            LLMServiceError: If the Gemini API call fails or returns no text.
        """
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=prompt,
                config={
                    "system_instruction": self._system_prompt,
                    "temperature": self._temperature,
                },
            )
        except Exception as e:
            logger.exception("Gemini API call failed", extra={"model": self._model_name})
            raise LLMServiceError(f"Gemini generation failed: {e}", cause=e) from e

        if not response.text or not response.text.strip():
            logger.error("Gemini returned empty response", extra={"model": self._model_name})
            raise LLMServiceError("Gemini returned empty response")

        logger.info(
            "LLM generation completed",
            extra={"model": self._model_name, "characters": len(response.text)},
        )
        return response.text
