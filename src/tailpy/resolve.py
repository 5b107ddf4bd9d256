from __future__ import annotations

from .offsets import OffsetSpec, RelativeZero, Signed


def resolve_start(spec: OffsetSpec, total: int) -> int | None:
    """Map an offset spec onto a 0-based start index for an input of ``total`` units.

    ``None`` means nothing is emitted. The same rules apply to lines and bytes:

    - ``+0`` selects the whole input unless it is empty.
    - ``0`` selects nothing.
    - ``+N`` starts at unit N (1-based); past the end selects nothing.
    - ``-N`` starts N units before the end; more than ``total`` clamps to 0.
    """
    if total < 0:
        raise ValueError(f"total must be non-negative, got {total}")

    if isinstance(spec, RelativeZero):
        return 0 if total > 0 else None

    if not isinstance(spec, Signed):
        raise TypeError(f"unsupported offset spec: {type(spec)!r}")

    n = spec.value
    if n == 0 or total == 0 or n > total:
        return None
    if n > 0:
        return n - 1
    return max(total + n, 0)
