"""Best-effort extraction of a JSON object embedded in free text."""

from dataclasses import dataclass
import json
from typing import Any

from src.domain.constants import (
    MAX_EXTRACTION_CANDIDATES,
    MAX_EXTRACTION_CHARS,
)


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of an extraction attempt.

    Attributes:
        ok: True when ``value`` holds a decoded JSON object.
        value: Decoded object on success.
        error: Reason for failure otherwise.
    """

    ok: bool
    value: dict[str, Any] | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: dict[str, Any]) -> "ExtractionResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "ExtractionResult":
        return cls(ok=False, error=error)


def _balanced_end(text: str, start: int) -> int | None:
    """Return the index of the brace closing the one at ``start``."""
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    return None


def extract_json_object(text: str | None) -> ExtractionResult:
    """Find the first balanced ``{...}`` block that decodes to an object.

    Candidates that are unbalanced or fail to decode are skipped, so prose
    such as ``"use {braces} carefully"`` before the payload does not hide it.
    Texts longer than ``MAX_EXTRACTION_CHARS`` are rejected and at most
    ``MAX_EXTRACTION_CANDIDATES`` opening braces are tried.

    Args:
        text: Free text, possibly wrapping JSON in prose or code fences.

    Returns:
        ExtractionResult: Decoded object or the reason nothing was found.
    """
    if not text:
        return ExtractionResult.failure("empty response")
    if len(text) > MAX_EXTRACTION_CHARS:
        return ExtractionResult.failure(
            f"response longer than {MAX_EXTRACTION_CHARS} characters"
        )

    last_error = "no JSON object found"
    attempts = 0
    start = text.find("{")
    while start != -1:
        if attempts == MAX_EXTRACTION_CANDIDATES:
            last_error = (
                f"no JSON object in the first {attempts} candidates"
            )
            break
        attempts += 1
        end = _balanced_end(text, start)
        if end is None:
            last_error = "unbalanced braces"
        else:
            try:
                value = json.loads(text[start : end + 1])
            except json.JSONDecodeError as exc:
                last_error = f"invalid JSON: {exc.msg}"
            else:
                if isinstance(value, dict):
                    return ExtractionResult.success(value)
                last_error = "JSON value is not an object"
        start = text.find("{", start + 1)
    return ExtractionResult.failure(last_error)


__all__ = ["ExtractionResult", "extract_json_object"]
