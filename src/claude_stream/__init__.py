# File: src/claude_stream/__init__.py
# Purpose: Decoder for stream-json output of the assistant CLI
from claude_stream.core.buffer import StreamLineBuffer, iter_events
from claude_stream.core.events import EventKind, EventRecord
from claude_stream.core.extractors import parse_stream_line
from claude_stream.core.transcript import collect_text, collect_tools, final_result
from claude_stream.output.sink import ConsoleSink
from claude_stream.tools.summary import summarize_tool_input

__all__ = [
    "EventKind",
    "EventRecord",
    "parse_stream_line",
    "summarize_tool_input",
    "StreamLineBuffer",
    "iter_events",
    "collect_text",
    "collect_tools",
    "final_result",
    "ConsoleSink",
]
