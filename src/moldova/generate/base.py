"""Core generator model and protocol definitions.

This module defines the primitives shared by every value generator: the
closed set of :class:`Command` kinds, the render-scoped :class:`PassCache` and
:class:`RenderContext`, the :class:`ValueGenerator` protocol, and the
:class:`CachedGenerator` base class that implements ordinal replay once for
all kinds.

Option values arrive as untyped strings.  The ``option_*`` helpers parse them
on use and raise :class:`~moldova.utils.errors.InvalidArgumentError` when a
value is missing or malformed, so a bad value is only discovered when the
token is rendered.
"""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Collection, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar, Generic, Protocol, TypeVar, runtime_checkable

from moldova.utils.errors import InvalidArgumentError, OrdinalError

from .seed import RandomSources

Options = Mapping[str, str]

T = TypeVar("T")

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class Command(Enum):
    """Enumeration of supported token commands."""

    GUID = "guid"
    INT = "int"
    FLOAT = "float"
    NOW = "now"
    TIME = "time"
    UNICODE = "unicode"
    ASCII = "ascii"
    COUNTRY = "country"
    FIRSTNAME = "firstname"
    LASTNAME = "lastname"

    @classmethod
    def lookup(cls, name: str) -> "Command | None":
        """Return the command called ``name`` or ``None`` if unknown."""

        try:
            return cls(name)
        except ValueError:
            return None


class PassCache:
    """Values produced so far in one render pass, per command.

    Each command owns an append-only list.  Its length always equals the
    number of non-ordinal invocations of that command in the pass.
    """

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: dict[Command, list[Any]] = {}

    def history(self, command: Command) -> list[Any]:
        """Return the mutable value list for ``command``."""

        values = self._values.get(command)
        if values is None:
            values = self._values[command] = []
        return values


def utc_now() -> datetime:
    """Return the current instant as an aware UTC datetime."""

    return datetime.now(timezone.utc)


@dataclass(slots=True)
class RenderContext:
    """State owned by exactly one render pass."""

    sources: RandomSources
    clock: Callable[[], datetime] = utc_now
    cache: PassCache = field(default_factory=PassCache)


@runtime_checkable
class ValueGenerator(Protocol):
    """Protocol for value generators.

    A generator turns a resolved option mapping into rendered text, reading
    and extending the pass cache held by ``context``.
    """

    command: Command

    def resolve(self, options: Options, context: RenderContext) -> str:
        """Return the text for one invocation of :attr:`command`."""

        ...


class CachedGenerator(ABC, Generic[T]):
    """Base class implementing ordinal replay over a typed value history.

    Subclasses implement :meth:`generate` to draw a fresh value and may
    override :meth:`present` to turn a cached value into text.  Presentation
    options apply on every read, so the cache keeps the untransformed value.
    """

    command: ClassVar[Command]

    def resolve(self, options: Options, context: RenderContext) -> str:
        ordinal = option_int(options, "ordinal", default=-1)
        history: list[T] = context.cache.history(self.command)
        if ordinal >= 0:
            if ordinal >= len(history):
                raise OrdinalError(
                    f"ordinal {ordinal} has not yet been produced for "
                    f"'{self.command.value}' in this pass ({len(history)} available)"
                )
            value = history[ordinal]
        else:
            value = self.generate(options, context)
            history.append(value)
        return self.present(value, options)

    @abstractmethod
    def generate(self, options: Options, context: RenderContext) -> T:
        """Draw a fresh value for one non-ordinal invocation."""

    def present(self, value: T, options: Options) -> str:
        return str(value)


# ---------------------------------------------------------------------------
# Option parsing helpers
# ---------------------------------------------------------------------------


def option_str(options: Options, key: str) -> str:
    """Return the raw value of ``key``."""

    value = options.get(key)
    if value is None:
        raise InvalidArgumentError(f"missing option '{key}'")
    return value


def option_int(options: Options, key: str, *, default: int | None = None) -> int:
    """Return ``key`` parsed as a base-10 integer.

    Only an optional sign followed by ASCII digits is accepted; whitespace,
    ``_`` separators and non-ASCII digits are rejected.
    """

    raw = options.get(key)
    if raw is None:
        if default is not None:
            return default
        raise InvalidArgumentError(f"missing option '{key}'")
    if not _INT_PATTERN.fullmatch(raw):
        raise InvalidArgumentError(f"option '{key}' must be an integer, got {raw!r}")
    return int(raw, 10)


def option_float(options: Options, key: str) -> float:
    """Return ``key`` parsed as a finite float."""

    raw = option_str(options, key)
    try:
        value = float(raw)
    except ValueError:
        raise InvalidArgumentError(f"option '{key}' must be a number, got {raw!r}") from None
    if not math.isfinite(value):
        raise InvalidArgumentError(f"option '{key}' must be finite, got {raw!r}")
    return value


def option_choice(options: Options, key: str, choices: Collection[str]) -> str:
    """Return ``key`` after checking it is one of ``choices``."""

    value = option_str(options, key)
    if value not in choices:
        allowed = ", ".join(sorted(choices))
        raise InvalidArgumentError(f"option '{key}' must be one of [{allowed}], got {value!r}")
    return value


__all__ = [
    "Command",
    "CachedGenerator",
    "Options",
    "PassCache",
    "RenderContext",
    "ValueGenerator",
    "option_choice",
    "option_float",
    "option_int",
    "option_str",
    "utc_now",
]
