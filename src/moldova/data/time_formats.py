"""Named ``strftime`` presets accepted by the ``format`` option."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# MySQL insert friendly.
SIMPLE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
SIMPLE_TIME_WITH_ZONE_FORMAT = "%Y-%m-%d %H:%M:%S %z"

TIME_FORMATS: Mapping[str, str] = MappingProxyType(
    {
        "simple": SIMPLE_TIME_FORMAT,
        "simpletz": SIMPLE_TIME_WITH_ZONE_FORMAT,
    }
)

__all__ = ["SIMPLE_TIME_FORMAT", "SIMPLE_TIME_WITH_ZONE_FORMAT", "TIME_FORMATS"]
