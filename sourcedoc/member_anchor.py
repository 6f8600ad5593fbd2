"""Utility for generating in-page anchors for inlined declarations."""

import re

from sourcedoc.declaration import Declaration


def member_anchor(decl: Declaration) -> str:
    """Anchor of a declaration on its parent's page.

    Uses the USR when there is one, so overloads stay distinct; otherwise a
    GitHub-ish slug of the name.
    """
    if decl.usr:
        return "/" + decl.usr
    s = decl.name.strip().lower()
    s = re.sub(r"[^a-z0-9]+", "-", s)
    s = re.sub(r"-{2,}", "-", s).strip("-")
    return "/" + (s or "section")
