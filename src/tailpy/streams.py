from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LineSource(Protocol):
    """Anything that can be read forward one terminated segment at a time."""

    def readline(self, size: int = -1, /) -> bytes: ...


@runtime_checkable
class SeekableSource(Protocol):
    """A byte source that supports direct positioning."""

    def read(self, size: int = -1, /) -> bytes: ...

    def seek(self, offset: int, whence: int = 0, /) -> int: ...

    def tell(self) -> int: ...


@runtime_checkable
class ByteSink(Protocol):
    def write(self, data: bytes, /) -> int | None: ...
