# File: src/claude_stream/core/events.py
# Purpose: Type definitions for decoded stream-json events
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EventKind(str, Enum):
    """Top-level event kinds emitted by the assistant CLI"""
    SYSTEM = "system"
    ASSISTANT = "assistant"
    USER = "user"
    STREAM_EVENT = "stream_event"
    RESULT = "result"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class EventRecord:
    """
    One decoded stream-json line, reduced to what a live display needs.

    Only the fields that belong to ``kind`` are ever set:
    - STREAM_EVENT: ``text``
    - ASSISTANT: ``tool_name`` and ``tool_input_summary``
    - RESULT: ``result`` and ``is_error``
    """
    kind: EventKind
    text: Optional[str] = None
    tool_name: Optional[str] = None
    tool_input_summary: Optional[str] = None
    result: Optional[str] = None
    is_error: bool = False

    @classmethod
    def unknown(cls) -> "EventRecord":
        return cls(kind=EventKind.UNKNOWN)

    @property
    def is_tool_use(self) -> bool:
        return self.tool_name is not None
