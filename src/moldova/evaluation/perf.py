"""Lightweight profiling harness for compile and render costs.

``profile_template``
    Compile a template once, render it ``iterations`` times and report the
    elapsed time of each phase.  The split shows how much parsing is
    amortized across repeated renders.

The function neither prints nor logs; results are returned to the caller so
tests or tools can aggregate them as needed.
"""

from __future__ import annotations

from time import perf_counter
from typing import Dict

from moldova.generate import RandomSources
from moldova.template import compile_template
from moldova.utils.errors import RenderError

__all__ = ["profile_template"]


def profile_template(
    template: str,
    iterations: int,
    *,
    sources: RandomSources | None = None,
) -> Dict[str, float]:
    """Return timings (seconds) for compiling and rendering ``template``.

    Keys: ``compile``, ``render`` (all iterations), ``render_mean``,
    ``total`` and ``failures`` (count of failed renders, as a float so the
    mapping stays homogeneous).  Compile errors propagate.
    """

    if iterations < 1:
        raise ValueError("iterations must be at least 1")

    timings: Dict[str, float] = {}
    total_start = perf_counter()

    t0 = perf_counter()
    program = compile_template(template)
    timings["compile"] = perf_counter() - t0

    failures = 0
    t0 = perf_counter()
    for result in program.render_many(iterations, sources=sources):
        if isinstance(result, RenderError):
            failures += 1
    timings["render"] = perf_counter() - t0

    timings["render_mean"] = timings["render"] / iterations
    timings["failures"] = float(failures)
    timings["total"] = perf_counter() - total_start
    return timings
