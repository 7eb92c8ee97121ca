# File: src/claude_stream/output/sink.py
# Purpose: Render decoded events to a live console stream
from typing import Optional, TextIO

from claude_stream.core.events import EventRecord

CYAN = "\033[0;36m"
NC = "\033[0m"


class ConsoleSink:
    """
    Writes streamed text verbatim and a one-line notice per tool call.

    Text goes to ``stream``; tool notices go to ``notice_stream`` (the same
    stream unless told otherwise). Both are flushed after every write so
    output shows up while the assistant is still running.
    """

    def __init__(
        self,
        stream: TextIO,
        notice_stream: Optional[TextIO] = None,
        color: bool = False
    ):
        self.stream = stream
        self.notice_stream = notice_stream if notice_stream is not None else stream
        self.color = color

    def render(self, event: EventRecord) -> None:
        if event.text is not None:
            _write(self.stream, event.text)
        if event.tool_name is not None:
            _write(self.notice_stream, self.format_tool_notice(event))

    def format_tool_notice(self, event: EventRecord) -> str:
        label = f"{CYAN}[TOOL]{NC}" if self.color else "[TOOL]"
        if event.tool_input_summary is not None:
            return f"\n{label} {event.tool_name}: {event.tool_input_summary}\n"
        return f"\n{label} {event.tool_name}\n"


def _write(stream: TextIO, text: str) -> None:
    """Write and flush; characters the stream cannot encode become '?'"""
    try:
        stream.write(text)
    except UnicodeEncodeError:
        # e.g. a lone surrogate from a "\ud83d" escape
        encoding = getattr(stream, "encoding", None) or "utf-8"
        stream.write(text.encode(encoding, errors="replace").decode(encoding))
    stream.flush()
