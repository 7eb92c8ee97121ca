# File: src/claude_stream/tools/__init__.py
# Purpose: Tool-use input summaries
from claude_stream.tools.summary import SUMMARY_RULES, summarize_tool_input, truncate_command

__all__ = [
    "SUMMARY_RULES",
    "summarize_tool_input",
    "truncate_command",
]
