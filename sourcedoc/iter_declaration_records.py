"""Utility for iterating over the declaration records of a loaded file."""

from collections.abc import Iterable
from typing import Any


def iter_declaration_records(doc: Any) -> Iterable[dict[str, Any]]:
    """Iterate over records in a bare list or under a top-level ``items`` key."""
    items = (doc.get("items") or []) if isinstance(doc, dict) else doc
    for it in items or []:
        if isinstance(it, dict) and it.get("kind"):
            yield it
