# File: src/claude_stream/core/__init__.py
# Purpose: Line decoding, classification and payload extraction
