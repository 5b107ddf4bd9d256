from __future__ import annotations

import codecs

from .streams import ByteSink


class LossyTextSink:
    """Binary sink that replaces invalid UTF-8 with U+FFFD on the way out.

    Decoding is incremental, so a multi-byte character split across two
    writes comes out intact. Call :meth:`finish` at the end of each input so
    a dangling partial sequence is flushed as a replacement character.
    """

    def __init__(self, out: ByteSink, *, encoding: str = "utf-8") -> None:
        self._out = out
        self._encoding = encoding
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")

    def write(self, data: bytes) -> int:
        text = self._decoder.decode(data)
        if text:
            self._out.write(text.encode(self._encoding))
        return len(data)

    def finish(self) -> None:
        text = self._decoder.decode(b"", final=True)
        if text:
            self._out.write(text.encode(self._encoding))
        self._decoder.reset()

    def flush(self) -> None:
        flush = getattr(self._out, "flush", None)
        if flush is not None:
            flush()
