from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .errors import FileOpenError, FileReadError
from .streams import LineSource, SeekableSource


logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True, slots=True)
class FileCounts:
    total_lines: int
    total_bytes: int


def iter_lines(
    src: LineSource,
    *,
    terminator: bytes = b"\n",
    chunk_size: int = READ_CHUNK_SIZE,
) -> Iterator[bytes]:
    """Yield terminated segments of ``src``, terminators included.

    A trailing segment without a terminator is yielded as-is. Only one
    segment is held in memory at a time.
    """
    if len(terminator) != 1:
        raise ValueError(f"terminator must be a single byte, got {terminator!r}")
    if terminator == b"\n":
        yield from iter(src.readline, b"")
        return

    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    # readline() only splits on b"\n"; read bounded pieces and split by hand
    # so a file without b"\n" is never pulled in whole.
    pending = bytearray()
    for chunk in iter(lambda: src.readline(chunk_size), b""):
        pending += chunk
        while (i := pending.find(terminator)) >= 0:
            yield bytes(pending[: i + 1])
            del pending[: i + 1]
    if pending:
        yield bytes(pending)


def count_lines(src: LineSource, *, terminator: bytes = b"\n") -> FileCounts:
    lines = 0
    total = 0
    for line in iter_lines(src, terminator=terminator):
        lines += 1
        total += len(line)
    return FileCounts(total_lines=lines, total_bytes=total)


def count_file(path: str | Path, *, terminator: bytes = b"\n") -> FileCounts:
    p = str(path)
    try:
        fh = open(p, "rb")
    except OSError as e:
        raise FileOpenError(path=p, reason=e.strerror or str(e)) from e
    with fh:
        try:
            counts = count_lines(fh, terminator=terminator)
        except OSError as e:
            raise FileReadError(path=p, reason=e.strerror or str(e)) from e
    logger.debug("counted %s: %d lines, %d bytes", p, counts.total_lines, counts.total_bytes)
    return counts


def stream_size(src: SeekableSource) -> int:
    """Size of a seekable source, found by positioning rather than reading."""
    fileno = getattr(src, "fileno", None)
    if fileno is not None:
        try:
            return os.fstat(fileno()).st_size
        except (OSError, ValueError):
            # In-memory buffers expose fileno() but raise when it is called.
            pass
    pos = src.tell()
    try:
        return src.seek(0, os.SEEK_END)
    finally:
        src.seek(pos)


def file_size(path: str | Path) -> int:
    p = str(path)
    try:
        return os.stat(p).st_size
    except OSError as e:
        raise FileOpenError(path=p, reason=e.strerror or str(e)) from e
