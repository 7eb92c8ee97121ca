# File: tests/test_tool_summary.py
# Purpose: Tool-use input summaries and Bash command truncation
import pytest

from claude_stream.tools.summary import (
    BASH_SUMMARY_MAX_BYTES,
    summarize_tool_input,
    truncate_command,
)


class TestSummarizeToolInput:
    """Per-tool summary rules"""

    @pytest.mark.parametrize("tool_name", ["Read", "Edit", "Write"])
    def test_file_tools(self, tool_name):
        tool_input = {"file_path": "/src/main.zig", "old_string": "a", "content": "b"}
        assert summarize_tool_input(tool_name, tool_input) == "/src/main.zig"

    @pytest.mark.parametrize("tool_name", ["Glob", "Grep"])
    def test_pattern_tools(self, tool_name):
        tool_input = {"pattern": "fn main", "path": "src/"}
        assert summarize_tool_input(tool_name, tool_input) == "fn main"

    def test_task(self):
        tool_input = {"description": "Explore codebase", "prompt": "long prompt", "subagent_type": "Explore"}
        assert summarize_tool_input("Task", tool_input) == "Explore codebase"

    def test_short_bash_command(self):
        assert summarize_tool_input("Bash", {"command": "zig build test"}) == "zig build test"

    def test_bash_uses_command_not_description(self):
        tool_input = {"command": "ls", "description": "List files"}
        assert summarize_tool_input("Bash", tool_input) == "ls"

    def test_long_bash_command(self):
        command = "x" * 70
        summary = summarize_tool_input("Bash", {"command": command})
        assert summary == "x" * 60 + "..."
        assert len(summary) == 63

    def test_long_file_path_is_not_truncated(self):
        path = "/very/long/" + "a" * 200 + ".py"
        assert summarize_tool_input("Read", {"file_path": path}) == path

    @pytest.mark.parametrize("tool_name", ["UnknownTool", "WebFetch", "read", "BASH", "Bash ", ""])
    def test_no_rule(self, tool_name):
        tool_input = {"file_path": "/a", "command": "ls", "pattern": "*", "description": "d"}
        assert summarize_tool_input(tool_name, tool_input) is None

    @pytest.mark.parametrize("tool_name,tool_input", [
        ("Read", {}),
        ("Read", {"path": "/a"}),
        ("Edit", {"file_path": None}),
        ("Write", {"file_path": ["/a"]}),
        ("Bash", {"command": 42}),
        ("Bash", {"cmd": "ls"}),
        ("Glob", {"pattern": {"glob": "*"}}),
        ("Grep", {"query": "x"}),
        ("Task", {"prompt": "do it"}),
    ])
    def test_missing_or_mistyped_field(self, tool_name, tool_input):
        assert summarize_tool_input(tool_name, tool_input) is None

    def test_empty_string_field_is_kept(self):
        assert summarize_tool_input("Glob", {"pattern": ""}) == ""


class TestTruncateCommand:
    """Byte-offset truncation of shell commands"""

    def test_at_limit_is_verbatim(self):
        command = "a" * BASH_SUMMARY_MAX_BYTES
        assert truncate_command(command) == command

    def test_one_over_limit(self):
        command = "a" * (BASH_SUMMARY_MAX_BYTES + 1)
        assert truncate_command(command) == "a" * BASH_SUMMARY_MAX_BYTES + "..."

    def test_limit_counts_bytes_not_characters(self):
        # 30 two-byte characters fit exactly, 31 do not
        assert truncate_command("é" * 30) == "é" * 30
        assert truncate_command("é" * 31) == "é" * 30 + "..."

    def test_split_multibyte_character(self):
        # 59 ASCII bytes then a 3-byte character straddling the cut
        command = "a" * 59 + "世界"
        summary = truncate_command(command)
        assert summary.startswith("a" * 59)
        assert summary.endswith("...")
        assert "世" not in summary
        assert summary == "a" * 59 + "\ufffd..."

    def test_lone_surrogate_does_not_raise(self):
        command = "echo " + "\ud83d" + "x" * 80
        summary = truncate_command(command)
        assert summary.startswith("echo ")
        assert summary.endswith("...")

    def test_custom_limit(self):
        assert truncate_command("abcdef", max_bytes=3) == "abc..."
