# File: src/claude_stream/core/transcript.py
# Purpose: Helpers that fold a sequence of events into transcript data
from typing import Iterable, Optional

from claude_stream.core.events import EventKind, EventRecord


def collect_text(events: Iterable[EventRecord]) -> str:
    """Concatenate every streamed text fragment"""
    return "".join(event.text for event in events if event.text is not None)


def collect_tools(events: Iterable[EventRecord]) -> list[tuple[str, Optional[str]]]:
    """(tool_name, tool_input_summary) pairs in stream order"""
    return [
        (event.tool_name, event.tool_input_summary)
        for event in events
        if event.tool_name is not None
    ]


def final_result(events: Iterable[EventRecord]) -> Optional[EventRecord]:
    last = None
    for event in events:
        if event.kind is EventKind.RESULT:
            last = event
    return last
