"""Single pass template compiler.

The scan tracks one flag, whether it is inside a token.  Braces do not nest:
a ``{`` inside a token is token text, and a ``}`` outside a token is literal
text.  A token still open at the end of the template is kept as literal
text without its opening brace.  Options are resolved against the command defaults here, once, so the
render loop never splits strings.
"""

from __future__ import annotations

from collections.abc import Mapping

from moldova.generate import Command
from moldova.utils.errors import MalformedTokenError

from .options import KEY_VALUE_SEPARATOR, command_defaults, resolve_options
from .program import InvocationStep, LiteralStep, Program, Step

TOKEN_OPEN = "{"
TOKEN_CLOSE = "}"


def compile_token(
    body: str,
    defaults: Mapping[str, Mapping[str, str]] | None = None,
) -> InvocationStep:
    """Compile the text between a token's braces into an invocation step."""

    name, _, raw_options = body.partition(KEY_VALUE_SEPARATOR)
    try:
        options = resolve_options(command_defaults(name, defaults), raw_options)
    except MalformedTokenError as exc:
        raise MalformedTokenError(f"malformed token {{{body}}}: {exc}") from None
    return InvocationStep(name=name, command=Command.lookup(name), options=options)


def compile_template(
    template: str,
    *,
    defaults: Mapping[str, Mapping[str, str]] | None = None,
) -> Program:
    """Compile ``template`` into a reusable :class:`Program`.

    Parameters
    ----------
    template:
        Literal text with ``{command:key:value|...}`` tokens.
    defaults:
        Optional per-command option overrides layered over the built-in
        defaults before explicit token options.

    Raises
    ------
    MalformedTokenError
        If an option segment lacks a value.
    """

    steps: list[Step] = []
    buf: list[str] = []
    in_token = False
    for ch in template:
        if not in_token and ch == TOKEN_OPEN:
            if buf:
                steps.append(LiteralStep("".join(buf)))
                buf.clear()
            in_token = True
        elif in_token and ch == TOKEN_CLOSE:
            steps.append(compile_token("".join(buf), defaults))
            buf.clear()
            in_token = False
        else:
            buf.append(ch)

    if buf:
        steps.append(LiteralStep("".join(buf)))
    return Program(tuple(steps), template)


__all__ = ["compile_template", "compile_token"]
