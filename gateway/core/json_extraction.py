"""
Defensive JSON extraction from free-form model output.

Models asked for "JSON only" still wrap answers in markdown fences or
commentary. Extraction keeps the span from the first opening bracket to the
last closing bracket and leaves shape checks to the caller.
"""

import json
from typing import Any

from .exceptions import ResponseParseError

_OPENERS = "[{"
_CLOSERS = "]}"


def extract_json_payload(text: str) -> str:
    """
    Return the outermost JSON-looking substring of text.

    The payload starts at the first "[" or "{" and ends at the last "]" or
    "}". Text without an opening bracket, or whose last closing bracket comes
    before the first opening one, is returned stripped.

    Example:
        >>> extract_json_payload('Sure! ```json\\n{"a": [1, 2]}\\n``` Hope that helps.')
        '{"a": [1, 2]}'
    """
    starts = [i for i in (text.find(ch) for ch in _OPENERS) if i != -1]
    if not starts:
        return text.strip()

    start = min(starts)
    end = max(text.rfind(ch) for ch in _CLOSERS)
    if end < start:
        return text.strip()

    return text[start:end + 1]


def parse_json_payload(text: str) -> Any:
    """
    Extract and parse the JSON value in a model response.

    Raises:
        ResponseParseError: If the extracted payload is not valid JSON
    """
    payload = extract_json_payload(text or "")
    try:
        return json.loads(payload)
    except json.JSONDecodeError as e:
        raise ResponseParseError(
            f"Model response is not valid JSON: {e.msg} (line {e.lineno}, column {e.colno})",
            raw_response=text or "",
        ) from e
