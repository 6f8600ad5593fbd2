"""Totally ordered declaration visibility levels."""

from enum import IntEnum

ACCESSIBILITY_PREFIX = "source.lang.swift.accessibility."


class AccessLevel(IntEnum):
    """Visibility of a declaration, ordered from least to most visible."""

    PRIVATE = 0
    FILEPRIVATE = 1
    INTERNAL = 2
    PACKAGE = 3
    PUBLIC = 4
    OPEN = 5

    @classmethod
    def from_human_string(cls, value: str) -> "AccessLevel":
        """Parse a level from a config value like ``"public"``."""
        try:
            return cls[value.strip().upper()]
        except KeyError:
            msg = f"Unknown access level: {value!r}"
            raise ValueError(msg) from None

    @classmethod
    def from_accessibility(cls, accessibility: str | None) -> "AccessLevel | None":
        """Parse the introspection tool's accessibility string, if present."""
        if not accessibility:
            return None
        value = accessibility.removeprefix(ACCESSIBILITY_PREFIX)
        return cls.from_human_string(value)

    @property
    def label(self) -> str:
        return self.name.lower()
