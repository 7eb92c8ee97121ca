# File: src/claude_stream/core/buffer.py
# Purpose: Reassemble NDJSON lines from arbitrarily split output chunks
from typing import Iterable, Iterator, Union

from claude_stream.core.events import EventRecord
from claude_stream.core.extractors import parse_stream_line

Chunk = Union[str, bytes]


class StreamLineBuffer:
    """
    Stateful line splitter for stream-json output.

    Chunks read from a pipe rarely end on a line boundary. The buffer keeps
    the incomplete tail between calls and only parses lines once their
    newline has arrived. Text is buffered as UTF-8 bytes so a multibyte
    character split across two reads is rejoined before decoding.
    """

    def __init__(self) -> None:
        self._pending = b""

    @property
    def buffered_size(self) -> int:
        """Number of bytes waiting for a newline"""
        return len(self._pending)

    def feed(self, chunk: Chunk) -> list[EventRecord]:
        """
        Add a chunk and parse every line it completes.

        Args:
            chunk: Raw output, ``bytes`` or ``str``

        Returns:
            Events for the completed lines, in order. Blank lines are skipped.
        """
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8", errors="surrogatepass")
        data = self._pending + chunk
        *lines, self._pending = data.split(b"\n")
        return self._parse_lines(lines)

    def flush(self) -> list[EventRecord]:
        """Parse whatever is left as a final, unterminated line"""
        remaining, self._pending = self._pending, b""
        return self._parse_lines([remaining])

    def _parse_lines(self, lines: list[bytes]) -> list[EventRecord]:
        events = []
        for line in lines:
            if not line.strip():
                continue
            events.append(parse_stream_line(line))
        return events


def iter_events(chunks: Iterable[Chunk]) -> Iterator[EventRecord]:
    """Yield events from an iterable of chunks, flushing at the end"""
    buffer = StreamLineBuffer()
    for chunk in chunks:
        yield from buffer.feed(chunk)
    yield from buffer.flush()
