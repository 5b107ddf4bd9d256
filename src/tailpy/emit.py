from __future__ import annotations

import os

from .counting import READ_CHUNK_SIZE, iter_lines
from .streams import ByteSink, LineSource, SeekableSource


DEFAULT_CHUNK_SIZE = READ_CHUNK_SIZE


def emit_lines(
    src: LineSource,
    start: int | None,
    out: ByteSink,
    *,
    terminator: bytes = b"\n",
) -> int:
    """Copy lines from ``src`` to ``out`` starting at 0-based line ``start``.

    Lines before ``start`` are read and dropped; there is no way to skip
    them without scanning. Returns the number of bytes written.
    """
    if start is None:
        return 0
    written = 0
    for i, line in enumerate(iter_lines(src, terminator=terminator)):
        if i >= start:
            out.write(line)
            written += len(line)
    return written


def emit_bytes(
    src: SeekableSource,
    start: int | None,
    out: ByteSink,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Seek ``src`` to byte ``start`` and copy everything after it to ``out``.

    Bytes before ``start`` are never read. Returns the number of bytes written.
    """
    if start is None:
        return 0
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    src.seek(start, os.SEEK_SET)
    written = 0
    for chunk in iter(lambda: src.read(chunk_size), b""):
        out.write(chunk)
        written += len(chunk)
    return written
