"""Utility for making declaration names safe for use as file names."""

from urllib.parse import quote

# Characters kept as-is besides letters, digits and ".-_~".
SAFE_CHARS = "()"


def page_filename(name: str) -> str:
    """Make a stable, reversible filename token.

    Percent-encodes everything outside a conservative set, so operators and
    argument labels (``==(_:_:)``) map to distinct names.
    """
    name = name.strip()
    if name in {"", ".", ".."}:
        # Avoid pathological emptiness and directory aliases
        return quote(name, safe="").replace(".", "%2E") or "Unknown"
    return quote(name, safe=SAFE_CHARS)
