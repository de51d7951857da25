"""Deterministic vocabulary fixes applied to raw transcripts."""

import json
import re
from collections.abc import Mapping
from pathlib import Path

DEFAULT_CORRECTIONS: dict[str, str] = {
    "Thank you, sir. Have a good day in the": "Thank you sa pag attend",
    "young": "yoong",
}


class CorrectionFilter:
    """
    Applies literal phrase substitutions to transcript text.

    Matching is case-insensitive and only hits whole words or phrases: the
    phrase may not be glued to another letter, digit or underscore on either
    side. Rules run in the mapping's iteration order and each rule sees the
    output of the rules before it, so a replacement text can be rewritten by
    a later rule but never by an earlier one.
    """

    def __init__(self, corrections: Mapping[str, str]):
        self._rules = [
            (self._compile(phrase), replacement)
            for phrase, replacement in corrections.items()
            if phrase
        ]

    @staticmethod
    def _compile(phrase: str) -> re.Pattern[str]:
        return re.compile(rf"(?<!\w){re.escape(phrase)}(?!\w)", re.IGNORECASE)

    def apply(self, text: str) -> str:
        for pattern, replacement in self._rules:
            text = pattern.sub(lambda _match, value=replacement: value, text)
        return text


def load_corrections(path: Path | None) -> dict[str, str]:
    """
    Loads the substitution table.

    Args:
        path: JSON file holding an object of phrase -> replacement. When None,
            the built-in table is used.

    Raises:
        ValueError: If the file does not contain a string-to-string object.
    """
    if path is None:
        return dict(DEFAULT_CORRECTIONS)

    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise ValueError(f"Corrections file '{path}' must map strings to strings")
    return data
