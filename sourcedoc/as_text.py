"""Utility for normalizing free-text record values to strings."""


def as_text(v: object) -> str:
    """Convert a record value to a string.

    Handles None, paragraph lists and ``{"text": ...}`` wrappers; paragraphs are
    joined with blank lines.
    """
    if v is None:
        return ""
    if isinstance(v, str):
        return v.strip()
    if isinstance(v, dict):
        return as_text(v.get("text"))
    if isinstance(v, list):
        return "\n\n".join(t for t in (as_text(x) for x in v) if t)
    return str(v).strip()
