from __future__ import annotations

from dataclasses import dataclass


class TailError(Exception):
    """Base class for errors raised by tailpy."""


@dataclass(slots=True)
class InvalidOffsetFormat(TailError):
    token: str
    unit: str | None = None

    def __str__(self) -> str:
        if self.unit:
            return f"illegal {self.unit} count -- {self.token}"
        return f"illegal offset -- {self.token}"


@dataclass(slots=True)
class FileOpenError(TailError):
    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


@dataclass(slots=True)
class FileReadError(TailError):
    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"
