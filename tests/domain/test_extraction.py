"""Tests for JSON-from-prose extraction."""

import pytest

from src.domain.constants import (
    MAX_EXTRACTION_CANDIDATES,
    MAX_EXTRACTION_CHARS,
)
from src.domain.services.extraction import ExtractionResult, extract_json_object


def test_extracts_object_wrapped_in_prose():
    """The JSON block is found inside surrounding text."""
    text = (
        "Here is your plan:\n```json\n"
        '{"methodology": "Pay cards first", "risk_score": 42}\n```\n'
        "Good luck!"
    )

    result = extract_json_object(text)

    assert result.ok is True
    assert result.value == {"methodology": "Pay cards first", "risk_score": 42}
    assert result.error is None


def test_nested_objects_and_braces_in_strings():
    """Nested objects and braces inside strings do not confuse matching."""
    text = 'Result: {"a": {"b": [1, 2]}, "note": "use } and { freely"} done'

    result = extract_json_object(text)

    assert result.value == {"a": {"b": [1, 2]}, "note": "use } and { freely"}


def test_skips_prose_braces_before_payload():
    """A non-JSON brace group before the payload is skipped."""
    text = 'Keep {momentum} going. {"risk_score": 10}'

    assert extract_json_object(text).value == {"risk_score": 10}


def test_escaped_quotes_inside_strings():
    """Escaped quotes keep the scanner inside the string."""
    text = '{"action": "Say \\"no\\" to new cards {now}"}'

    assert extract_json_object(text).value == {
        "action": 'Say "no" to new cards {now}'
    }


@pytest.mark.parametrize(
    ("text", "error"),
    [
        (None, "empty response"),
        ("", "empty response"),
        ("I cannot help with that.", "no JSON object found"),
        ('{"risk_score": 10', "unbalanced braces"),
    ],
)
def test_failures_are_reported_not_raised(text, error):
    """Failures come back as results with a reason."""
    result = extract_json_object(text)

    assert result == ExtractionResult(ok=False, error=error)


def test_invalid_json_reports_decoder_message():
    """A balanced but invalid block reports the decoder error."""
    result = extract_json_object("{risk_score: 10}")

    assert result.ok is False
    assert result.error.startswith("invalid JSON:")


def test_overlong_response_is_rejected():
    """Replies beyond the size bound are not scanned."""
    text = '{"risk_score": 10}' + " " * MAX_EXTRACTION_CHARS

    result = extract_json_object(text)

    assert result.ok is False
    assert "longer than" in result.error


def test_candidate_scan_is_bounded():
    """Only a bounded number of opening braces are tried."""
    noise = "{ " * MAX_EXTRACTION_CANDIDATES
    within = "{ " * (MAX_EXTRACTION_CANDIDATES - 1) + '{"risk_score": 10}'

    bounded = extract_json_object(noise + '{"risk_score": 10}')

    assert bounded.ok is False
    assert f"first {MAX_EXTRACTION_CANDIDATES} candidates" in bounded.error
    assert extract_json_object(within).value == {"risk_score": 10}
