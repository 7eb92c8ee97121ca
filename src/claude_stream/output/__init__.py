# File: src/claude_stream/output/__init__.py
# Purpose: Console rendering of decoded events
