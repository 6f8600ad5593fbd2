"""Logic for layering a user configuration over the defaults."""

from typing import Any

# List-valued keys whose user values extend the defaults instead of replacing them.
ADDITIVE_KEYS = frozenset({"abstract_glob"})


def _extend_unique(base: list[Any], extra: list[Any]) -> list[Any]:
    """Append items of ``extra`` not already in ``base``, keeping first-seen order."""
    out = list(base)
    for item in extra:
        if item not in out:
            out.append(item)
    return out


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` overlaid with ``update``.

    Nested mappings merge key by key. Lists under ADDITIVE_KEYS are extended,
    since glob order decides which abstract file wins; any other value from
    ``update`` replaces the base value.
    """
    merged = dict(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        elif key in ADDITIVE_KEYS and isinstance(current, list):
            merged[key] = _extend_unique(current, list(value or []))
        else:
            merged[key] = value
    return merged
