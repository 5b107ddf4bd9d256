from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import BinaryIO, TextIO

from .counting import count_lines, stream_size
from .emit import emit_bytes, emit_lines
from .errors import FileOpenError, FileReadError, TailError
from .offsets import OffsetSpec, parse_offset
from .resolve import resolve_start
from .streams import ByteSink


logger = logging.getLogger(__name__)


class TailMode(str, Enum):
    LINES = "lines"
    BYTES = "bytes"

    @property
    def unit(self) -> str:
        return "line" if self is TailMode.LINES else "byte"


@dataclass(frozen=True, slots=True)
class TailConfig:
    files: tuple[str, ...]
    spec: OffsetSpec
    mode: TailMode = TailMode.LINES
    quiet: bool = False
    terminator: bytes = b"\n"

    @classmethod
    def from_counts(
        cls,
        files: list[str] | tuple[str, ...],
        *,
        lines: str = "10",
        bytes_: str | None = None,
        quiet: bool = False,
    ) -> "TailConfig":
        """Build a config from raw count tokens; a byte count wins over lines."""
        if bytes_ is not None:
            mode = TailMode.BYTES
            spec = parse_offset(bytes_, unit=mode.unit)
        else:
            mode = TailMode.LINES
            spec = parse_offset(lines, unit=mode.unit)
        return cls(files=tuple(files), spec=spec, mode=mode, quiet=quiet)


@dataclass(frozen=True, slots=True)
class FileFailure:
    path: str
    error: TailError


@dataclass(frozen=True, slots=True)
class TailResult:
    files_processed: int
    bytes_written: int
    failures: tuple[FileFailure, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.failures


def open_source(path: str | Path) -> BinaryIO:
    p = str(path)
    try:
        return open(p, "rb")
    except OSError as e:
        raise FileOpenError(path=p, reason=e.strerror or str(e)) from e


class _OutputFailed(Exception):
    def __init__(self, cause: OSError) -> None:
        super().__init__(cause)
        self.cause = cause


class _GuardedSink:
    """Tags write failures so they are not mistaken for input read errors."""

    def __init__(self, out: ByteSink) -> None:
        self._out = out

    def write(self, data: bytes) -> int | None:
        try:
            return self._out.write(data)
        except OSError as e:
            raise _OutputFailed(e) from e


def tail_stream(
    src: BinaryIO,
    spec: OffsetSpec,
    *,
    out: ByteSink,
    mode: TailMode = TailMode.LINES,
    terminator: bytes = b"\n",
    name: str = "<stream>",
) -> int:
    """Write the selected suffix of ``src`` to ``out``; return bytes written.

    Line mode scans ``src`` once to count lines, rewinds, then scans again
    to emit. Byte mode takes the size from metadata and seeks straight to
    the start position.
    """
    sink = _GuardedSink(out)
    try:
        if mode is TailMode.BYTES:
            total = stream_size(src)
            start = resolve_start(spec, total)
            logger.debug("%s: %d bytes, spec %s, start %s", name, total, spec, start)
            return emit_bytes(src, start, sink)

        counts = count_lines(src, terminator=terminator)
        start = resolve_start(spec, counts.total_lines)
        logger.debug("%s: %d lines, spec %s, start %s", name, counts.total_lines, spec, start)
        if start is None:
            return 0
        src.seek(0)
        return emit_lines(src, start, sink, terminator=terminator)
    except _OutputFailed as e:
        # Output channel failures end the run; they say nothing about this input.
        raise e.cause from None
    except OSError as e:
        raise FileReadError(path=name, reason=e.strerror or str(e)) from e


def tail_file(
    path: str | Path,
    spec: OffsetSpec,
    *,
    out: ByteSink,
    mode: TailMode = TailMode.LINES,
    terminator: bytes = b"\n",
) -> int:
    with open_source(path) as fh:
        return tail_stream(fh, spec, out=out, mode=mode, terminator=terminator, name=str(path))


def _header(index: int, name: str) -> bytes:
    prefix = "\n" if index > 0 else ""
    return f"{prefix}==> {name} <==\n".encode("utf-8", "surrogateescape")


def tail_files(config: TailConfig, *, out: ByteSink, err: TextIO) -> TailResult:
    """Process ``config.files`` in order, reporting per-file failures to ``err``.

    A failing file is reported and skipped; the remaining files are still
    processed. Headers are written when more than one file is given unless
    ``config.quiet`` is set.
    """
    show_headers = len(config.files) > 1 and not config.quiet
    processed = 0
    written = 0
    failures: list[FileFailure] = []

    for i, name in enumerate(config.files):
        try:
            fh = open_source(name)
        except FileOpenError as e:
            logger.debug("skipping %s", name, exc_info=True)
            print(e, file=err)
            failures.append(FileFailure(path=name, error=e))
            continue

        with fh:
            if show_headers:
                out.write(_header(i, name))
            try:
                written += tail_stream(
                    fh,
                    config.spec,
                    out=out,
                    mode=config.mode,
                    terminator=config.terminator,
                    name=name,
                )
            except FileReadError as e:
                logger.debug("aborted %s", name, exc_info=True)
                print(e, file=err)
                failures.append(FileFailure(path=name, error=e))
            else:
                processed += 1
            finally:
                finish = getattr(out, "finish", None)
                if finish is not None:
                    finish()

    return TailResult(files_processed=processed, bytes_written=written, failures=tuple(failures))
