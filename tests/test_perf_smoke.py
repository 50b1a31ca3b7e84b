from __future__ import annotations

import os

import pytest

from moldova.evaluation.perf import profile_template
from moldova.generate import RandomSources
from moldova.utils.errors import MalformedTokenError

if os.getenv("SKIP_PERF_TESTS") == "1":
    pytest.skip("Performance tests skipped by SKIP_PERF_TESTS", allow_module_level=True)


def _get_env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, "").strip() or default)
    except ValueError:
        return default


def _get_env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, "").strip() or default)
    except ValueError:
        return default


_TEMPLATE = (
    "{guid}|{int:min:1|max:100}|{float}|{time}|{unicode:length:8}|"
    "{country}|{firstname}|{lastname:case:up}|{guid:ordinal:0}"
)


def test_profile_template_smoke() -> None:
    timings = profile_template(_TEMPLATE, 5, sources=RandomSources.from_seed("perf"))
    assert set(timings) == {"compile", "render", "render_mean", "failures", "total"}
    for value in timings.values():
        assert isinstance(value, float)
        assert value >= 0.0
    assert timings["failures"] == 0.0
    assert timings["total"] >= timings["compile"] + timings["render"] - 0.005


def test_profile_template_counts_failures() -> None:
    timings = profile_template("{guid:ordinal:3}", 4)
    assert timings["failures"] == 4.0


def test_profile_template_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        profile_template("x", 0)
    with pytest.raises(MalformedTokenError):
        profile_template("{int:min}", 1)


def test_profile_template_budget() -> None:
    iterations = _get_env_int("PERF_REPEAT", 2000)
    timings = profile_template(_TEMPLATE, iterations, sources=RandomSources.from_seed(1))
    budget = _get_env_float("PERF_MAX_SEC", 5.0)
    assert (
        timings["total"] <= budget
    ), f"render total {timings['total']:.3f}s (budget {budget:.3f}s)"
