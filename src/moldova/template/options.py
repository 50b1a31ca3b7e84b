"""Per-command default options and the option string resolver.

A token's raw options look like ``key:value|key:value``.  Only the first
``:`` of each pair separates key from value, so values such as ``%H:%M`` keep
their colons.  Values are left as strings; generators parse them on use.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from moldova.utils.errors import MalformedTokenError

OPTION_SEPARATOR = "|"
KEY_VALUE_SEPARATOR = ":"

DEFAULT_OPTIONS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "guid": MappingProxyType({"ordinal": "-1"}),
        "now": MappingProxyType({"ordinal": "-1", "format": "simple", "zone": "UTC"}),
        "time": MappingProxyType(
            {"ordinal": "-1", "format": "simple", "min": "0", "max": "1455512165", "zone": "UTC"}
        ),
        "int": MappingProxyType({"min": "0", "max": "100", "ordinal": "-1"}),
        "float": MappingProxyType({"min": "0.0", "max": "100.0", "ordinal": "-1"}),
        "ascii": MappingProxyType({"length": "2", "case": "down", "ordinal": "-1"}),
        "unicode": MappingProxyType({"length": "2", "case": "down", "ordinal": "-1"}),
        "country": MappingProxyType({"ordinal": "-1", "case": "up"}),
        "firstname": MappingProxyType({"ordinal": "-1", "language": "english", "case": "none"}),
        "lastname": MappingProxyType({"ordinal": "-1", "language": "english", "case": "none"}),
    }
)


def command_defaults(
    name: str,
    overrides: Mapping[str, Mapping[str, str]] | None = None,
) -> dict[str, str]:
    """Return the default options for ``name`` with ``overrides`` applied.

    Unknown commands have no defaults and yield an empty mapping.
    """

    merged = dict(DEFAULT_OPTIONS.get(name, {}))
    if overrides and name in overrides:
        merged.update(overrides[name])
    return merged


def parse_options(raw_options: str) -> dict[str, str]:
    """Split ``raw_options`` into a key/value mapping.

    Raises
    ------
    MalformedTokenError
        If a segment has no ``:`` separating key from value.
    """

    parsed: dict[str, str] = {}
    if not raw_options:
        return parsed
    for segment in raw_options.split(OPTION_SEPARATOR):
        key, sep, value = segment.partition(KEY_VALUE_SEPARATOR)
        if not sep:
            raise MalformedTokenError(
                f"option {segment!r} is missing a value; expected 'key:value'"
            )
        parsed[key] = value
    return parsed


def resolve_options(defaults: Mapping[str, str], raw_options: str) -> Mapping[str, str]:
    """Overlay the options in ``raw_options`` onto ``defaults``.

    The result is read-only.  Keys not present in the defaults are kept.
    """

    merged = dict(defaults)
    merged.update(parse_options(raw_options))
    return MappingProxyType(merged)


__all__ = [
    "DEFAULT_OPTIONS",
    "KEY_VALUE_SEPARATOR",
    "OPTION_SEPARATOR",
    "command_defaults",
    "parse_options",
    "resolve_options",
]
