"""Tests for the Gemini adapter against a mocked client."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from smart_minutes.domain import SYSTEM_PROMPT
from smart_minutes.exceptions import LLMServiceError
from smart_minutes.infrastructure import GeminiLLMService


def _make_service(response=None, error=None):
    client = MagicMock()
    if error is not None:
        client.models.generate_content.side_effect = error
    else:
        client.models.generate_content.return_value = response
    return GeminiLLMService(client, "gemini-test", SYSTEM_PROMPT, 0.4), client


def test_generate_passes_system_prompt_and_temperature():
    service, client = _make_service(SimpleNamespace(text="Minutes"))

    assert service.generate("Summarize this") == "Minutes"
    client.models.generate_content.assert_called_once_with(
        model="gemini-test",
        contents="Summarize this",
        config={"system_instruction": SYSTEM_PROMPT, "temperature": 0.4},
    )


def test_api_failure_is_wrapped():
    service, _ = _make_service(error=RuntimeError("429"))

    with pytest.raises(LLMServiceError) as exc_info:
        service.generate("Summarize this")

    assert isinstance(exc_info.value.cause, RuntimeError)


@pytest.mark.parametrize("text", [None, "", "  \n"])
def test_empty_response_is_an_error(text):
    service, _ = _make_service(SimpleNamespace(text=text))

    with pytest.raises(LLMServiceError):
        service.generate("Summarize this")
