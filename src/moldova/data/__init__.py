"""Read-only lookup tables consumed by the value generators."""

from .countries import COUNTRY_CODES
from .names import DEFAULT_LANGUAGE, FIRST_NAMES, LANGUAGES, LAST_NAMES, Name
from .time_formats import TIME_FORMATS
from .unicode_ranges import PRINTABLE_RANGES

__all__ = [
    "COUNTRY_CODES",
    "DEFAULT_LANGUAGE",
    "FIRST_NAMES",
    "LANGUAGES",
    "LAST_NAMES",
    "Name",
    "PRINTABLE_RANGES",
    "TIME_FORMATS",
]
