"""Tests for access level parsing and ordering."""

import pytest

from sourcedoc.access_level import AccessLevel


def test_levels_are_totally_ordered() -> None:
    """Verify the visibility order from private to open."""
    assert (
        AccessLevel.PRIVATE
        < AccessLevel.FILEPRIVATE
        < AccessLevel.INTERNAL
        < AccessLevel.PACKAGE
        < AccessLevel.PUBLIC
        < AccessLevel.OPEN
    )


def test_from_accessibility() -> None:
    """Verify parsing of the introspection tool's accessibility strings."""
    parsed = AccessLevel.from_accessibility("source.lang.swift.accessibility.public")
    assert parsed is AccessLevel.PUBLIC
    assert AccessLevel.from_accessibility("fileprivate") is AccessLevel.FILEPRIVATE
    assert AccessLevel.from_accessibility(None) is None
    assert AccessLevel.from_accessibility("") is None


def test_from_human_string() -> None:
    """Verify config-style parsing and rejection of unknown names."""
    assert AccessLevel.from_human_string(" Open ") is AccessLevel.OPEN
    assert AccessLevel.INTERNAL.label == "internal"
    with pytest.raises(ValueError, match="Unknown access level"):
        AccessLevel.from_human_string("protected")
