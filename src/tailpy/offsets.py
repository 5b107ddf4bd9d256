from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from .errors import InvalidOffsetFormat


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass(frozen=True, slots=True)
class RelativeZero:
    """The literal ``+0``: the whole input, but only if it is non-empty."""

    def __str__(self) -> str:
        return "+0"


@dataclass(frozen=True, slots=True)
class Signed:
    """A signed count.

    Negative values count back from the end of the input; positive values
    name a 1-based unit counted from the start. ``Signed(0)`` selects nothing.
    """

    value: int

    def __str__(self) -> str:
        return f"{self.value:+d}" if self.value > 0 else str(self.value)


OffsetSpec = RelativeZero | Signed


def _clamp(v: int) -> int:
    return max(INT64_MIN, min(INT64_MAX, v))


@dataclass(frozen=True, slots=True)
class OffsetParser:
    pattern: re.Pattern[str]

    @classmethod
    def build(cls) -> "OffsetParser":
        return cls(pattern=re.compile(r"([+-])?([0-9]+)"))

    def parse(self, token: str, *, unit: str | None = None) -> OffsetSpec:
        m = self.pattern.fullmatch(token)
        if m is None:
            raise InvalidOffsetFormat(token=token, unit=unit)
        sign, digits = m.group(1), m.group(2)
        digits = digits.lstrip("0") or "0"
        # More than 19 significant digits is past the int64 range whatever the
        # value; int() would also refuse very long strings.
        magnitude = int(digits) if len(digits) <= 19 else INT64_MAX + 1
        if sign == "+":
            if magnitude == 0:
                return RelativeZero()
            return Signed(_clamp(magnitude))
        # A bare count means "from the end", same as an explicit "-".
        return Signed(_clamp(-magnitude))


@lru_cache(maxsize=None)
def default_parser() -> OffsetParser:
    return OffsetParser.build()


def parse_offset(token: str, *, unit: str | None = None, parser: OffsetParser | None = None) -> OffsetSpec:
    return (parser or default_parser()).parse(token, unit=unit)
