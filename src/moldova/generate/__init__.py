"""Command based registry of value generators.

Every :class:`~moldova.generate.base.Command` has exactly one registered
generator.  :func:`get_generator` raises
:class:`~moldova.utils.errors.UnsupportedTokenError` for commands outside the
registry.
"""

from __future__ import annotations

from moldova.utils.errors import UnsupportedTokenError

from .base import Command, PassCache, RenderContext, ValueGenerator
from .identifiers import GuidGenerator
from .names import FirstNameGenerator, LastNameGenerator
from .numbers import FloatGenerator, IntGenerator
from .places import CountryGenerator
from .seed import RandomSources, default_sources
from .text import AsciiGenerator, UnicodeGenerator
from .times import NowGenerator, TimeGenerator

_GENERATORS: dict[Command, ValueGenerator] = {}


def register_generator(generator: ValueGenerator) -> None:
    """Register ``generator`` for its :attr:`~ValueGenerator.command`.

    A later registration for the same command replaces the earlier one.
    """

    _GENERATORS[generator.command] = generator


def get_generator(command: Command | None, name: str = "") -> ValueGenerator:
    """Return the generator for ``command``.

    Raises
    ------
    UnsupportedTokenError
        If ``command`` is ``None`` or has no registered generator.
    """

    generator = _GENERATORS.get(command) if command is not None else None
    if generator is None:
        label = name or (command.value if command is not None else "")
        raise UnsupportedTokenError(f"unsupported token command: {label!r}")
    return generator


for _generator in (
    GuidGenerator(),
    IntGenerator(),
    FloatGenerator(),
    NowGenerator(),
    TimeGenerator(),
    UnicodeGenerator(),
    AsciiGenerator(),
    CountryGenerator(),
    FirstNameGenerator(),
    LastNameGenerator(),
):
    register_generator(_generator)
del _generator

__all__ = [
    "Command",
    "PassCache",
    "RandomSources",
    "RenderContext",
    "ValueGenerator",
    "default_sources",
    "get_generator",
    "register_generator",
]
