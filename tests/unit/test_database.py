"""
Tests for the shared database helpers.
"""
import ulid

from app.core.database.base import generate_ulid


def test_generate_ulid_returns_parseable_string():
    value = generate_ulid()

    assert isinstance(value, str)
    assert len(value) == 26
    assert str(ulid.parse(value)) == value


def test_generate_ulid_is_unique():
    assert len({generate_ulid() for _ in range(100)}) == 100
