# File: src/claude_stream/app.py
# Purpose: Pipe stream-json from stdin to a live console rendering
import os
import sys
from functools import partial
from typing import BinaryIO, Optional

from claude_stream.config import Settings, get_settings
from claude_stream.core.buffer import StreamLineBuffer
from claude_stream.core.events import EventKind, EventRecord
from claude_stream.infrastructure.logging.setup import get_logger, setup_logging
from claude_stream.output.sink import ConsoleSink

logger = get_logger(__name__)


def run(reader: BinaryIO, sink: ConsoleSink, chunk_size: int = 64 * 1024) -> int:
    """
    Decode everything ``reader`` produces and render it through ``sink``.

    Returns 1 when the last result event reports an error, 0 otherwise.
    """
    buffer = StreamLineBuffer()
    last_result: Optional[EventRecord] = None
    read = getattr(reader, "read1", reader.read)

    def handle(events: list[EventRecord]) -> None:
        nonlocal last_result
        for event in events:
            sink.render(event)
            if event.kind is EventKind.RESULT:
                last_result = event
                logger.info(
                    "stream_result_received",
                    is_error=event.is_error,
                    result_chars=len(event.result) if event.result else 0
                )

    for chunk in iter(partial(read, chunk_size), b""):
        handle(buffer.feed(chunk))
    handle(buffer.flush())

    if last_result is not None and last_result.is_error:
        return 1
    return 0


def build_sink(settings: Settings) -> ConsoleSink:
    notice_stream = sys.stderr if settings.NOTICE_STREAM == "stderr" else sys.stdout
    return ConsoleSink(
        sys.stdout,
        notice_stream=notice_stream,
        color=settings.use_color(notice_stream),
    )


def _silence_stdout() -> None:
    """Point stdout at devnull so the flush at interpreter exit cannot fail again"""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def main() -> int:
    settings = get_settings()
    setup_logging(
        log_level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        app_name=settings.APP_NAME,
        json_logs=settings.LOG_JSON,
    )
    try:
        return run(sys.stdin.buffer, build_sink(settings), settings.READ_CHUNK_SIZE)
    except KeyboardInterrupt:
        return 130
    except BrokenPipeError:
        # Downstream closed early (e.g. piped into head)
        _silence_stdout()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
