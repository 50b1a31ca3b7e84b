"""Random character strings.

``{unicode}`` builds each character in two draws: first a range chosen
uniformly from :data:`moldova.data.PRINTABLE_RANGES`, then a code point chosen
uniformly inside that half-open range.  Selection is uniform over *ranges*,
not over code points, so the short Greek or Phoenician blocks show up far more
often than their share of the alphabet would suggest.

``{ascii}`` draws lowercase ASCII letters uniformly.

Neither kind lower-cases on ``case:down``: generated text is already in its
native case, and scripts without case are left alone by every option.
"""

from __future__ import annotations

import random
import string
from collections.abc import Sequence

from moldova.data import PRINTABLE_RANGES
from moldova.utils.errors import InvalidArgumentError

from .base import CachedGenerator, Command, Options, RenderContext, option_int
from .casing import UP, option_case, upper_keep_length


def random_string(
    length: int,
    rng: random.Random,
    ranges: Sequence[tuple[int, int]] = PRINTABLE_RANGES,
) -> str:
    """Return ``length`` code points drawn range-first from ``ranges``."""

    chars: list[str] = []
    for _ in range(length):
        low, high = ranges[rng.randrange(len(ranges))]
        chars.append(chr(rng.randrange(low, high)))
    return "".join(chars)


def option_length(options: Options) -> int:
    """Return the ``length`` option, which must be positive."""

    length = option_int(options, "length")
    if length <= 0:
        raise InvalidArgumentError(f"option 'length' must be greater than zero, got {length}")
    return length


class _StringGenerator(CachedGenerator[str]):
    def present(self, value: str, options: Options) -> str:
        if option_case(options) == UP:
            return upper_keep_length(value)
        return value


class UnicodeGenerator(_StringGenerator):
    """``{unicode}``: ``length`` code points from the curated ranges."""

    command = Command.UNICODE

    def generate(self, options: Options, context: RenderContext) -> str:
        return random_string(option_length(options), context.sources.fast)


class AsciiGenerator(_StringGenerator):
    """``{ascii}``: ``length`` lowercase ASCII letters."""

    command = Command.ASCII

    def generate(self, options: Options, context: RenderContext) -> str:
        rng = context.sources.fast
        letters = string.ascii_lowercase
        return "".join(rng.choice(letters) for _ in range(option_length(options)))


__all__ = ["AsciiGenerator", "UnicodeGenerator", "option_length", "random_string"]
