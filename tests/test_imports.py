"""Smoke tests for package import and version."""

import moldova


def test_import_package() -> None:
    assert isinstance(moldova, object)


def test_version() -> None:
    assert moldova.__version__ == "0.1.0"


def test_public_names() -> None:
    for name in moldova.__all__:
        assert hasattr(moldova, name), name
