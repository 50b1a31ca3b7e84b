from __future__ import annotations

import random
import re

import pytest

from moldova import RandomSources, compile_template
from moldova.generate.numbers import check_bounds
from moldova.utils.errors import InvalidArgumentError, RangeError


def render_all(template: str, n: int = 200, seed: int = 3) -> list[str]:
    program = compile_template(template)
    sources = RandomSources(fast=random.Random(seed), secure=random.Random(seed))
    return [program.render(sources=sources) for _ in range(n)]


def test_int_default_range() -> None:
    assert all(0 <= int(v) <= 100 for v in render_all("{int}"))


def test_int_custom_range() -> None:
    assert all(4999 <= int(v) <= 5000 for v in render_all("{int:max:5000|min:4999}"))


def test_int_negative_range() -> None:
    assert all(-5001 <= int(v) <= -5000 for v in render_all("{int:max:-5000|min:-5001}"))


def test_int_bounds_are_inclusive() -> None:
    assert set(render_all("{int:min:5|max:6}")) == {"5", "6"}
    assert set(render_all("{int:min:-6|max:-5}")) == {"-6", "-5"}


def test_int_range_ending_at_zero() -> None:
    values = {int(v) for v in render_all("{int:min:-2|max:0}")}
    assert values == {-2, -1, 0}


def test_int_equal_bounds() -> None:
    assert set(render_all("{int:min:42|max:42}", n=5)) == {"42"}


def test_int_back_reference() -> None:
    for line in render_all("{int}@{int:ordinal:0}", n=20):
        a, b = line.split("@")
        assert a == b


def test_float_default_range() -> None:
    assert all(0.0 <= float(v) <= 100.0 for v in render_all("{float}"))


def test_float_custom_range() -> None:
    values = render_all("{float:max:5000.0|min:4999.0}")
    assert all(4999.0 <= float(v) <= 5000.0 for v in values)


def test_float_negative_range() -> None:
    values = render_all("{float:max:-5000.0|min:-5001.0}")
    assert all(-5001.0 <= float(v) <= -5000.0 for v in values)


def test_float_renders_six_decimals() -> None:
    for v in render_all("{float}", n=20):
        assert re.fullmatch(r"-?\d+\.\d{6}", v)


def test_float_back_reference() -> None:
    for line in render_all("{float}@{float:ordinal:0}", n=20):
        a, b = line.split("@")
        assert a == b


@pytest.mark.parametrize(
    "template",
    [
        "{int:min:10|max:1}",
        "{int:min:-5|max:5}",
        "{float:min:10|max:1}",
        "{float:min:-0.5|max:0.5}",
    ],
)
def test_bad_ranges(template: str) -> None:
    with pytest.raises(RangeError):
        compile_template(template).render()


@pytest.mark.parametrize(
    "template",
    [
        "{int:min:one}",
        "{int:max:1.5}",
        "{int:ordinal:first}",
        "{float:min:abc}",
        "{float:max:nan}",
        "{float:min:-inf}",
        "{int:min:\u0663|max:\u0663}",
        "{int:min:1_0|max:20}",
        "{int:min: 5|max:9}",
        "{guid:ordinal:\uff10}",
    ],
)
def test_non_numeric_values(template: str) -> None:
    with pytest.raises(InvalidArgumentError):
        compile_template(template).render()


def test_check_bounds_reports_mirroring() -> None:
    assert check_bounds(-10, -1, "int") is True
    assert check_bounds(-10, 0, "int") is True
    assert check_bounds(0, 10, "int") is False
    assert check_bounds(3, 3, "int") is False


def test_int_accepts_explicit_sign() -> None:
    assert set(render_all("{int:min:+7|max:+7}", n=3)) == {"7"}
    assert set(render_all("{int:min:-7|max:-7}", n=3)) == {"-7"}


class _LowestRandom(random.Random):
    def random(self) -> float:
        return 0.0


def test_float_lower_bound_is_closed_end() -> None:
    sources = RandomSources(fast=_LowestRandom(), secure=random.Random(0))
    assert compile_template("{float:min:2|max:3}").render(sources=sources) == "2.000000"
    # mirrored: the draw starts at the bound nearest zero
    assert compile_template("{float:min:-3|max:-2}").render(sources=sources) == "-2.000000"
