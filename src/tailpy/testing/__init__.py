from __future__ import annotations

from .corpus import generate_line_files, reference_tail

__all__ = ["generate_line_files", "reference_tail"]
