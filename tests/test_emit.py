from __future__ import annotations

import io

import pytest

from tailpy.emit import emit_bytes, emit_lines
from tailpy.streams import ByteSink, LineSource, SeekableSource

TEN = b"".join(f"line {i}\n".encode() for i in range(1, 11))


class _NoRead(io.BytesIO):
    def read(self, size: int | None = -1) -> bytes:
        raise AssertionError("source must not be read")

    def readline(self, size: int | None = -1) -> bytes:
        raise AssertionError("source must not be read")


class _CountingReader(io.BytesIO):
    def __init__(self, data: bytes) -> None:
        super().__init__(data)
        self.bytes_read = 0
        self.seeks: list[int] = []

    def read(self, size: int | None = -1) -> bytes:
        b = super().read(size)
        self.bytes_read += len(b)
        return b

    def seek(self, offset: int, whence: int = 0) -> int:
        self.seeks.append(offset)
        return super().seek(offset, whence)


def test_emit_lines_from_start_index() -> None:
    out = io.BytesIO()
    n = emit_lines(io.BytesIO(TEN), 7, out)
    assert out.getvalue() == b"line 8\nline 9\nline 10\n"
    assert n == len(out.getvalue())


def test_emit_lines_keeps_terminators_verbatim() -> None:
    out = io.BytesIO()
    emit_lines(io.BytesIO(b"a\r\nb\r\nc"), 1, out)
    assert out.getvalue() == b"b\r\nc"


def test_emit_lines_none_touches_nothing() -> None:
    out = io.BytesIO()
    assert emit_lines(_NoRead(TEN), None, out) == 0
    assert out.getvalue() == b""


def test_emit_lines_start_past_end() -> None:
    out = io.BytesIO()
    assert emit_lines(io.BytesIO(TEN), 50, out) == 0
    assert out.getvalue() == b""


def test_emit_bytes_zero_reproduces_input() -> None:
    data = bytes(range(256)) * 3
    out = io.BytesIO()
    assert emit_bytes(io.BytesIO(data), 0, out) == len(data)
    assert out.getvalue() == data


def test_emit_bytes_skips_prefix_without_reading_it() -> None:
    src = _CountingReader(TEN)
    out = io.BytesIO()
    emit_bytes(src, len(TEN) - 8, out, chunk_size=3)
    assert out.getvalue() == b"line 10\n"
    assert src.seeks == [len(TEN) - 8]
    assert src.bytes_read == 8


def test_emit_bytes_none_touches_nothing() -> None:
    out = io.BytesIO()
    assert emit_bytes(_NoRead(TEN), None, out) == 0
    assert out.getvalue() == b""


def test_emit_bytes_invalid_utf8_is_untouched() -> None:
    data = b"ok \xff\xfe bad \xc3"
    out = io.BytesIO()
    emit_bytes(io.BytesIO(data), 3, out)
    assert out.getvalue() == data[3:]


def test_emit_bytes_rejects_bad_chunk_size() -> None:
    with pytest.raises(ValueError):
        emit_bytes(io.BytesIO(b"x"), 0, io.BytesIO(), chunk_size=0)


def test_sources_satisfy_capabilities(tmp_path) -> None:
    p = tmp_path / "x.bin"
    p.write_bytes(b"x")
    with open(p, "rb") as fh:
        assert isinstance(fh, LineSource)
        assert isinstance(fh, SeekableSource)
    assert isinstance(io.BytesIO(), SeekableSource)
    assert isinstance(io.BytesIO(), ByteSink)
    assert not isinstance(object(), LineSource)
