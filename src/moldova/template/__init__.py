"""Template compilation and execution."""

from .compiler import compile_template, compile_token
from .options import DEFAULT_OPTIONS, command_defaults, parse_options, resolve_options
from .program import InvocationStep, LiteralStep, Program, Step

__all__ = [
    "DEFAULT_OPTIONS",
    "InvocationStep",
    "LiteralStep",
    "Program",
    "Step",
    "command_defaults",
    "compile_template",
    "compile_token",
    "parse_options",
    "resolve_options",
]
