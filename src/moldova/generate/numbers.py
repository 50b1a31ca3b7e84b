"""Random integers in ``[min, max]`` and floats in ``[min, max)``.

Both kinds share the same bound rules:

* ``min > max`` raises :class:`~moldova.utils.errors.RangeError`;
* a range straddling zero (``min < 0 < max``) is unsupported and raises
  :class:`~moldova.utils.errors.RangeError`;
* a range entirely at or below zero is mirrored to ``[-max, -min]``, drawn
  there, and negated.

Integer bounds are inclusive.  Floats are drawn as ``random() * (max - min)``
offset by ``min`` on the mirrored range and rendered with six decimals, so a
mirrored range yields values in ``(min, max]``.
"""

from __future__ import annotations

from moldova.utils.errors import RangeError

from .base import CachedGenerator, Command, Options, RenderContext, option_float, option_int


def check_bounds(low: float, high: float, kind: str) -> bool:
    """Validate ``[low, high]`` and return ``True`` when it must be mirrored."""

    if low > high:
        raise RangeError(
            f"{kind} lower bound {low} is greater than its upper bound {high}"
        )
    if low < 0 < high:
        raise RangeError(
            f"{kind} range [{low}, {high}] straddles zero, which is not supported"
        )
    return low < 0


class IntGenerator(CachedGenerator[int]):
    """``{int}``: a uniform integer in ``[min, max]``."""

    command = Command.INT

    def generate(self, options: Options, context: RenderContext) -> int:
        low = option_int(options, "min")
        high = option_int(options, "max")
        negate = check_bounds(low, high, "int")
        if negate:
            low, high = -high, -low
        n = context.sources.fast.randint(low, high)
        return -n if negate else n


class FloatGenerator(CachedGenerator[float]):
    """``{float}``: a uniform float in ``[min, max)``."""

    command = Command.FLOAT

    def generate(self, options: Options, context: RenderContext) -> float:
        low = option_float(options, "min")
        high = option_float(options, "max")
        negate = check_bounds(low, high, "float")
        if negate:
            low, high = -high, -low
        n = context.sources.fast.random() * (high - low) + low
        return -n if negate else n

    def present(self, value: float, options: Options) -> str:
        return f"{value:f}"


__all__ = ["FloatGenerator", "IntGenerator", "check_bounds"]
