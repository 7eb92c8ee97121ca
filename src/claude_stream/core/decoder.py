# File: src/claude_stream/core/decoder.py
# Purpose: Fail-soft JSON decoding and top-level event classification
import json
from typing import Any, Union

from claude_stream.core.events import EventKind

# Returned by decode_line when the line is not valid JSON. JSON null decodes
# to None, so None cannot double as the failure marker.
DECODE_FAILURE = object()

_EVENT_TAGS = {
    "stream_event": EventKind.STREAM_EVENT,
    "assistant": EventKind.ASSISTANT,
    "user": EventKind.USER,
    "system": EventKind.SYSTEM,
    "result": EventKind.RESULT,
}


def decode_line(line: Union[str, bytes]) -> Any:
    """
    Decode one NDJSON line into a generic JSON value.

    Never raises for bad input: syntax errors, invalid UTF-8 and absurd
    nesting all come back as ``DECODE_FAILURE``. Bytes are read as UTF-8
    only, so a ``bytes`` line and its ``str`` form always agree.

    Args:
        line: Raw line, with or without its trailing newline

    Returns:
        The decoded value, or ``DECODE_FAILURE``
    """
    try:
        if isinstance(line, bytes):
            # surrogatepass matches what json.loads accepts in a str
            line = line.decode("utf-8", errors="surrogatepass")
        return json.loads(line)
    except (ValueError, RecursionError):
        # JSONDecodeError and UnicodeDecodeError are both ValueError
        return DECODE_FAILURE


def classify_event(root: Any) -> EventKind:
    """Map the root ``type`` tag to an EventKind (exact match only)"""
    if not isinstance(root, dict):
        return EventKind.UNKNOWN
    tag = root.get("type")
    if not isinstance(tag, str):
        return EventKind.UNKNOWN
    return _EVENT_TAGS.get(tag, EventKind.UNKNOWN)
