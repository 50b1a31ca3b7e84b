"""Timestamps: the current instant and random instants between epoch bounds.

Both kinds convert to the ``zone`` option (an IANA zone name resolved through
:mod:`zoneinfo`) and format with ``format``, which is either a preset name from
:data:`moldova.data.TIME_FORMATS` or a ``strftime`` pattern.  Values are cached
as formatted strings, so a replay repeats the first rendering exactly.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from moldova.data import TIME_FORMATS
from moldova.utils.errors import InvalidArgumentError, RangeError

from .base import CachedGenerator, Command, Options, RenderContext, option_int, option_str


def load_zone(name: str) -> tzinfo:
    """Return the zone called ``name``."""

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        raise InvalidArgumentError(f"unknown time zone {name!r}") from None


def format_time(moment: datetime, fmt: str) -> str:
    """Format ``moment`` with a named preset or a ``strftime`` pattern."""

    try:
        return moment.strftime(TIME_FORMATS.get(fmt, fmt))
    except ValueError:
        raise InvalidArgumentError(f"invalid time format {fmt!r}") from None


class NowGenerator(CachedGenerator[str]):
    """``{now}``: the current instant."""

    command = Command.NOW

    def generate(self, options: Options, context: RenderContext) -> str:
        zone = load_zone(option_str(options, "zone"))
        fmt = option_str(options, "format")
        return format_time(context.clock().astimezone(zone), fmt)


class TimeGenerator(CachedGenerator[str]):
    """``{time}``: a uniform instant in ``[min, max)`` epoch seconds.

    Equal bounds select that fixed instant.
    """

    command = Command.TIME

    def generate(self, options: Options, context: RenderContext) -> str:
        low = option_int(options, "min")
        high = option_int(options, "max")
        if low > high:
            raise RangeError(
                f"time lower bound {low} is greater than its upper bound {high}"
            )
        zone = load_zone(option_str(options, "zone"))
        fmt = option_str(options, "format")

        span = high - low
        seconds = low + context.sources.fast.randrange(span) if span > 0 else low
        try:
            moment = datetime.fromtimestamp(seconds, tz=zone)
        except (OverflowError, OSError, ValueError):
            raise RangeError(f"epoch second {seconds} is outside the supported range") from None
        return format_time(moment, fmt)


__all__ = ["NowGenerator", "TimeGenerator", "format_time", "load_zone"]
