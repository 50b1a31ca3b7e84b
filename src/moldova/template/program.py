"""Compiled render steps and the :class:`Program` that executes them.

A :class:`Program` is an immutable tuple of steps.  Each call to
:meth:`Program.render` builds a fresh
:class:`~moldova.generate.base.RenderContext`, so back-references never leak
between passes and concurrent renders of one program do not interfere.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Union

from moldova.generate import Command, RandomSources, RenderContext, default_sources, get_generator
from moldova.generate.base import utc_now
from moldova.utils.errors import RenderError


@dataclass(slots=True, frozen=True)
class LiteralStep:
    """Fixed text emitted verbatim."""

    text: str

    def evaluate(self, context: RenderContext) -> str:
        return self.text


@dataclass(slots=True, frozen=True)
class InvocationStep:
    """A token bound to its resolved options.

    ``command`` is ``None`` when ``name`` is not a known command; evaluating
    such a step raises :class:`~moldova.utils.errors.UnsupportedTokenError`.
    """

    name: str
    command: Command | None
    options: Mapping[str, str]

    def evaluate(self, context: RenderContext) -> str:
        return get_generator(self.command, self.name).resolve(self.options, context)


Step = Union[LiteralStep, InvocationStep]


class Program:
    """The compiled form of one template."""

    __slots__ = ("_steps", "_template")

    def __init__(self, steps: tuple[Step, ...], template: str = "") -> None:
        self._steps = tuple(steps)
        self._template = template

    @property
    def steps(self) -> tuple[Step, ...]:
        return self._steps

    @property
    def template(self) -> str:
        """Source template the program was compiled from."""

        return self._template

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __repr__(self) -> str:
        return f"Program(template={self._template!r}, steps={len(self._steps)})"

    def render(
        self,
        *,
        sources: RandomSources | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> str:
        """Execute every step once and return the rendered text.

        Parameters
        ----------
        sources:
            Random sources for this pass.  Defaults to the process-wide pair.
        clock:
            Callable returning the current aware datetime for ``{now}``.

        Raises
        ------
        RenderError
            On the first failing step.  ``error.partial`` holds the text
            produced before the failure; it is not a valid line.
        """

        context = RenderContext(
            sources=sources if sources is not None else default_sources(),
            clock=clock if clock is not None else utc_now,
        )
        parts: list[str] = []
        for step in self._steps:
            try:
                parts.append(step.evaluate(context))
            except RenderError as exc:
                exc.partial = "".join(parts)
                raise
        return "".join(parts)

    def render_many(
        self,
        count: int,
        *,
        sources: RandomSources | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> Iterator[str | RenderError]:
        """Render ``count`` independent passes.

        Yields the rendered line, or the :class:`RenderError` that aborted that
        pass, in iteration order.  A failed pass never stops later ones.
        """

        for _ in range(count):
            try:
                yield self.render(sources=sources, clock=clock)
            except RenderError as exc:
                yield exc


__all__ = ["InvocationStep", "LiteralStep", "Program", "Step"]
