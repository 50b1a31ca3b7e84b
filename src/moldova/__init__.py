"""Random data from templates.

A template mixes literal text with bracketed tokens such as
``{int:min:1|max:9}`` or ``{guid}``.  :func:`compile_template` scans it once
into a :class:`Program`; :meth:`Program.render` then produces one line per
call, each with its own back-reference cache::

    program = compile_template("{firstname} {lastname} <{guid}> {guid:ordinal:0}")
    for _ in range(3):
        print(program.render())
"""

from .generate import RandomSources
from .template import Program, compile_template
from .utils.errors import (
    InvalidArgumentError,
    MalformedTokenError,
    OrdinalError,
    RangeError,
    RenderError,
    TemplateError,
    UnsupportedTokenError,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "MalformedTokenError",
    "OrdinalError",
    "Program",
    "RandomSources",
    "RangeError",
    "RenderError",
    "TemplateError",
    "UnsupportedTokenError",
    "compile_template",
    "__version__",
]
