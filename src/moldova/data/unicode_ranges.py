"""Curated Unicode code-point ranges used for random character strings.

Each range is half-open, ``(low, high)`` meaning ``low <= cp < high``.  The
ranges are disjoint.  Selection picks a range first and a code point second,
so small ranges are over-represented relative to their size.
"""

from __future__ import annotations

PRINTABLE_RANGES: tuple[tuple[int, int], ...] = (
    # Cyrillic
    (0x0400, 0x04FF),
    # Greek
    (0x0377, 0x03FF),
    # Hangul Jamo
    (0x1100, 0x11FF),
    # CJK unified ideographs
    (0x4E00, 0x4F80),
    (0x5000, 0x9FA0),
    (0x3400, 0x4DB0),
    # Arabic
    (0x0600, 0x06FF),
    # Katakana
    (0x30A0, 0x30F0),
    # Arabic presentation forms
    (0xFB50, 0xFDFF),
    # Thai
    (0x0E00, 0x0E7F),
    # Phoenician
    (0x10900, 0x1091F),
)

__all__ = ["PRINTABLE_RANGES"]
