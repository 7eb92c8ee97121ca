# File: src/claude_stream/core/extractors.py
# Purpose: Per-kind payload extraction and the single-line parse entry point
from typing import Any, Callable, Optional, Union

from claude_stream.core.decoder import DECODE_FAILURE, classify_event, decode_line
from claude_stream.core.events import EventKind, EventRecord
from claude_stream.tools.summary import summarize_tool_input

CONTENT_BLOCK_DELTA = "content_block_delta"
TOOL_USE = "tool_use"


def _get_object(parent: dict[str, Any], key: str) -> Optional[dict[str, Any]]:
    value = parent.get(key)
    return value if isinstance(value, dict) else None


def _get_string(parent: dict[str, Any], key: str) -> Optional[str]:
    value = parent.get(key)
    return value if isinstance(value, str) else None


def extract_stream_event(root: dict[str, Any]) -> EventRecord:
    """
    Pull the text fragment out of a content_block_delta stream event.

    Path: event -> type == "content_block_delta" -> delta -> text.
    Any missing or mistyped step leaves ``text`` unset.
    """
    text = None
    event = _get_object(root, "event")
    if event is not None and _get_string(event, "type") == CONTENT_BLOCK_DELTA:
        delta = _get_object(event, "delta")
        if delta is not None:
            text = _get_string(delta, "text")
    return EventRecord(kind=EventKind.STREAM_EVENT, text=text)


def extract_assistant(root: dict[str, Any]) -> EventRecord:
    """
    Pull the tool name and input summary from an assistant message.

    Only the first content block is looked at.
    """
    message = _get_object(root, "message")
    if message is None:
        return EventRecord(kind=EventKind.ASSISTANT)
    content = message.get("content")
    if not isinstance(content, list) or not content:
        return EventRecord(kind=EventKind.ASSISTANT)

    first = content[0]
    if not isinstance(first, dict) or _get_string(first, "type") != TOOL_USE:
        return EventRecord(kind=EventKind.ASSISTANT)

    tool_name = _get_string(first, "name")
    if tool_name is None:
        return EventRecord(kind=EventKind.ASSISTANT)

    summary = None
    tool_input = _get_object(first, "input")
    if tool_input is not None:
        summary = summarize_tool_input(tool_name, tool_input)
    return EventRecord(
        kind=EventKind.ASSISTANT,
        tool_name=tool_name,
        tool_input_summary=summary,
    )


def extract_result(root: dict[str, Any]) -> EventRecord:
    is_error = root.get("is_error")
    return EventRecord(
        kind=EventKind.RESULT,
        result=_get_string(root, "result"),
        is_error=is_error if isinstance(is_error, bool) else False,
    )


_EXTRACTORS: dict[EventKind, Callable[[dict[str, Any]], EventRecord]] = {
    EventKind.STREAM_EVENT: extract_stream_event,
    EventKind.ASSISTANT: extract_assistant,
    EventKind.RESULT: extract_result,
}


def parse_stream_line(line: Union[str, bytes]) -> EventRecord:
    """
    Parse a single line of stream-json output into an EventRecord.

    Malformed input never raises; it comes back as an UNKNOWN record with
    every optional field empty.

    Args:
        line: One NDJSON line as ``str`` or ``bytes``

    Returns:
        A new, immutable EventRecord
    """
    root = decode_line(line)
    if root is DECODE_FAILURE:
        return EventRecord.unknown()

    kind = classify_event(root)
    extractor = _EXTRACTORS.get(kind)
    if extractor is None:
        return EventRecord(kind=kind)
    return extractor(root)
