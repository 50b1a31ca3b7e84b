"""Case presentation helpers shared by the string generators.

The ``case`` option takes one of :data:`CASES`.  Transforms are applied when a
value is read, never when it is stored, so an ordinal replay may present the
same cached value in a different case.

Upper-casing is performed character by character and keeps a character
unchanged when its upper form is not a single code point (``"ß"``, ``"ΐ"``)
or when the script has no case at all.  A generated string therefore keeps
its length under every case option.
"""

from __future__ import annotations

from typing import Final

from .base import Options, option_choice

UP: Final = "up"
DOWN: Final = "down"
NONE: Final = "none"

CASES: Final = frozenset({UP, DOWN, NONE})


def option_case(options: Options) -> str:
    """Return the validated ``case`` option."""

    return option_choice(options, "case", CASES)


def upper_keep_length(text: str) -> str:
    """Upper-case ``text`` without changing its code point count."""

    out: list[str] = []
    for ch in text:
        up = ch.upper()
        out.append(up if len(up) == 1 else ch)
    return "".join(out)


def lower_keep_length(text: str) -> str:
    """Lower-case ``text`` without changing its code point count."""

    out: list[str] = []
    for ch in text:
        low = ch.lower()
        out.append(low if len(low) == 1 else ch)
    return "".join(out)


def apply_case(text: str, case: str) -> str:
    """Return ``text`` presented in ``case``; ``none`` leaves it untouched."""

    if case == UP:
        return upper_keep_length(text)
    if case == DOWN:
        return lower_keep_length(text)
    return text


__all__ = [
    "UP",
    "DOWN",
    "NONE",
    "CASES",
    "apply_case",
    "lower_keep_length",
    "option_case",
    "upper_keep_length",
]
