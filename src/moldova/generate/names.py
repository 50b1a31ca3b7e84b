"""First and last names with per-language spellings.

A name entry is chosen uniformly, then its spelling for ``language`` is
looked up (English when the entry has none for that language).  The cache
stores that spelling; ``case`` only changes what is emitted.
"""

from __future__ import annotations

from collections.abc import Sequence

from moldova.data import FIRST_NAMES, LANGUAGES, LAST_NAMES, Name

from .base import CachedGenerator, Command, Options, RenderContext, option_choice
from .casing import apply_case, option_case


class _NameGenerator(CachedGenerator[str]):
    names: Sequence[Name]

    def generate(self, options: Options, context: RenderContext) -> str:
        language = option_choice(options, "language", LANGUAGES)
        name = context.sources.fast.choice(self.names)
        return name.spelling(language)

    def present(self, value: str, options: Options) -> str:
        return apply_case(value, option_case(options))


class FirstNameGenerator(_NameGenerator):
    """``{firstname}``"""

    command = Command.FIRSTNAME
    names = FIRST_NAMES


class LastNameGenerator(_NameGenerator):
    """``{lastname}``"""

    command = Command.LASTNAME
    names = LAST_NAMES


__all__ = ["FirstNameGenerator", "LastNameGenerator"]
