from __future__ import annotations

from .api import FileFailure, TailConfig, TailMode, TailResult, tail_file, tail_files, tail_stream
from .errors import FileOpenError, FileReadError, InvalidOffsetFormat, TailError
from .offsets import INT64_MAX, INT64_MIN, OffsetParser, OffsetSpec, RelativeZero, Signed, parse_offset
from .resolve import resolve_start

__all__ = [
    "FileFailure",
    "FileOpenError",
    "FileReadError",
    "INT64_MAX",
    "INT64_MIN",
    "InvalidOffsetFormat",
    "OffsetParser",
    "OffsetSpec",
    "RelativeZero",
    "Signed",
    "TailConfig",
    "TailError",
    "TailMode",
    "TailResult",
    "parse_offset",
    "resolve_start",
    "tail_file",
    "tail_files",
    "tail_stream",
]
