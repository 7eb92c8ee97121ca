# File: src/claude_stream/tools/summary.py
# Purpose: Short display summaries for tool-use inputs
from typing import Any, Callable, Optional

BASH_SUMMARY_MAX_BYTES = 60
ELLIPSIS = "..."


def truncate_command(command: str, max_bytes: int = BASH_SUMMARY_MAX_BYTES) -> str:
    """
    Cut a shell command to ``max_bytes`` UTF-8 bytes and append "...".

    The cut is made on a byte offset, not on a character boundary. A
    multibyte character split by the cut shows up as U+FFFD.

    Args:
        command: Command line as it appeared in the tool input
        max_bytes: Byte budget before truncation kicks in

    Returns:
        The command unchanged if it fits, otherwise the cut prefix plus "..."
    """
    # surrogatepass keeps lone surrogates from JSON "\ud83d" escapes encodable
    raw = command.encode("utf-8", errors="surrogatepass")
    if len(raw) <= max_bytes:
        return command
    return raw[:max_bytes].decode("utf-8", errors="replace") + ELLIPSIS


def _verbatim(value: str) -> str:
    return value


class ToolSummaryRule:
    def __init__(self, field: str, transform: Callable[[str], str] = _verbatim) -> None:
        self.field = field
        self.transform = transform

    def apply(self, tool_input: dict[str, Any]) -> Optional[str]:
        value = tool_input.get(self.field)
        if not isinstance(value, str):
            return None
        return self.transform(value)


_FILE_PATH = ToolSummaryRule("file_path")
_PATTERN = ToolSummaryRule("pattern")

SUMMARY_RULES: dict[str, ToolSummaryRule] = {
    "Read": _FILE_PATH,
    "Edit": _FILE_PATH,
    "Write": _FILE_PATH,
    "Bash": ToolSummaryRule("command", truncate_command),
    "Glob": _PATTERN,
    "Grep": _PATTERN,
    "Task": ToolSummaryRule("description"),
}


def summarize_tool_input(tool_name: str, tool_input: dict[str, Any]) -> Optional[str]:
    """Summary for a known tool, or None when no rule or field matches"""
    rule = SUMMARY_RULES.get(tool_name)
    if rule is None:
        return None
    return rule.apply(tool_input)
