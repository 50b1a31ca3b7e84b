"""Typed exceptions raised while compiling and rendering templates."""

from __future__ import annotations


class TemplateError(ValueError):
    """Base class for template related errors."""


class MalformedTokenError(TemplateError):
    """Raised at compile time when a token's option syntax cannot be parsed."""


class RenderError(TemplateError):
    """Base class for errors raised while rendering a compiled template.

    ``partial`` holds the text produced by the failed pass up to the failing
    step.  Callers must discard it rather than treat it as a valid line.
    """

    def __init__(self, message: str, *, partial: str = "") -> None:
        super().__init__(message)
        self.partial = partial


class UnsupportedTokenError(RenderError):
    """Raised when a token names a command with no registered generator."""


class InvalidArgumentError(RenderError):
    """Raised when an option value fails to parse or is not an accepted choice."""


class RangeError(RenderError):
    """Raised when a lower bound exceeds its upper bound or straddles zero."""


class OrdinalError(RenderError):
    """Raised when an ordinal refers to a value not yet produced in the pass."""


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or is not a mapping."""


__all__ = [
    "TemplateError",
    "MalformedTokenError",
    "RenderError",
    "UnsupportedTokenError",
    "InvalidArgumentError",
    "RangeError",
    "OrdinalError",
    "ConfigError",
]
