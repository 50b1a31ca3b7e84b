"""ISO 3166-1 alpha-2 country codes."""

from __future__ import annotations

from moldova.data import COUNTRY_CODES

from .base import CachedGenerator, Command, Options, RenderContext
from .casing import DOWN, option_case


class CountryGenerator(CachedGenerator[str]):
    """``{country}``: a uniformly chosen code.

    Codes are cached upper-case; ``case:down`` lower-cases on read only.
    """

    command = Command.COUNTRY

    def generate(self, options: Options, context: RenderContext) -> str:
        return context.sources.fast.choice(COUNTRY_CODES)

    def present(self, value: str, options: Options) -> str:
        if option_case(options) == DOWN:
            return value.lower()
        return value


__all__ = ["CountryGenerator"]
