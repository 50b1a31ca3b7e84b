from __future__ import annotations

import random
import re

import pytest

from moldova import RandomSources, compile_template
from moldova.data import COUNTRY_CODES, FIRST_NAMES, LAST_NAMES
from moldova.data.names import Name
from moldova.generate import Command, get_generator
from moldova.generate.base import CachedGenerator
from moldova.generate.identifiers import uuid4_from_bytes
from moldova.utils.errors import InvalidArgumentError, OrdinalError, UnsupportedTokenError

UUID_RE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}")


class ExplodingRandom(random.Random):
    """A source that must never be drawn from."""

    def random(self) -> float:
        raise AssertionError("unexpected draw")

    def getrandbits(self, k: int) -> int:
        raise AssertionError("unexpected draw")

    def randbytes(self, n: int) -> bytes:
        raise AssertionError("unexpected draw")


def test_guid_shape() -> None:
    for _ in range(50):
        assert UUID_RE.fullmatch(compile_template("{guid}").render())


def test_guid_bits() -> None:
    assert uuid4_from_bytes(bytes(16)) == "00000000-0000-4000-8000-000000000000"
    assert uuid4_from_bytes(b"\xff" * 16) == "ffffffff-ffff-4fff-bfff-ffffffffffff"
    with pytest.raises(ValueError):
        uuid4_from_bytes(b"\x00" * 15)


def test_guid_draws_only_from_secure_source() -> None:
    src = RandomSources(fast=ExplodingRandom(), secure=random.Random(1))
    assert UUID_RE.fullmatch(compile_template("{guid}").render(sources=src))


def test_bulk_values_never_use_secure_source() -> None:
    src = RandomSources(fast=random.Random(1), secure=ExplodingRandom())
    program = compile_template("{int}{float}{time}{unicode}{ascii}{country}{firstname}{lastname}")
    assert program.render(sources=src)


def test_country_code() -> None:
    value = compile_template("{country}").render()
    assert len(value) == 2
    assert value in COUNTRY_CODES


def test_country_case() -> None:
    assert compile_template("{country:case:up}").render().isupper()
    assert compile_template("{country:case:down}").render().islower()


def test_country_back_reference() -> None:
    for _ in range(20):
        a, b = compile_template("{country}@{country:ordinal:0}").render().split("@")
        assert a == b
        assert len(a) == 2


def test_country_cache_stores_upper_case() -> None:
    program = compile_template("{country:case:down}@{country:ordinal:0}")
    a, b = program.render().split("@")
    assert b == a.upper()


def test_country_forward_reference() -> None:
    with pytest.raises(OrdinalError):
        compile_template("{country}@{country:ordinal:1}").render()


def test_firstname_default_language() -> None:
    english = {n.spelling("english") for n in FIRST_NAMES}
    for _ in range(20):
        assert compile_template("{firstname}").render() in english


def test_lastname_language() -> None:
    german = {n.spelling("german") for n in LAST_NAMES}
    for _ in range(20):
        assert compile_template("{lastname:language:german}").render() in german


def test_full_name() -> None:
    first, last = compile_template("{firstname} {lastname}").render().split(" ")
    assert first and last


def test_name_case_applied_on_read() -> None:
    program = compile_template("{firstname:case:up}@{firstname:ordinal:0}@{firstname:ordinal:0|case:down}")
    up, stored, down = program.render().split("@")
    assert up == stored.upper()
    assert down == stored.lower()


def test_name_spelling_fallback() -> None:
    name = Name({"english": "Liam"})
    assert name.spelling("spanish") == "Liam"
    assert Name({"english": "John", "spanish": "Juan"}).spelling("spanish") == "Juan"


@pytest.mark.parametrize(
    "template",
    ["{firstname:language:klingon}", "{lastname:case:title}", "{firstname:ordinal:}"],
)
def test_name_invalid_arguments(template: str) -> None:
    with pytest.raises(InvalidArgumentError):
        compile_template(template).render()


def test_name_forward_reference() -> None:
    with pytest.raises(OrdinalError):
        compile_template("{lastname}@{lastname:ordinal:1}").render()


def test_generator_without_generate_cannot_be_created() -> None:
    class Incomplete(CachedGenerator[str]):
        command = Command.GUID

    with pytest.raises(TypeError):
        Incomplete()  # type: ignore[abstract]


def test_registry_lookup() -> None:
    assert get_generator(Command.COUNTRY).command is Command.COUNTRY
    with pytest.raises(UnsupportedTokenError):
        get_generator(Command.lookup("bogus"), "bogus")
