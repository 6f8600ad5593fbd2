"""Minimal English pluralization used when no inflector is supplied.

Callers that need full inflection rules pass their own callable wherever an
``inflect`` argument is accepted.
"""

import re

_CONSONANT_Y_RE = re.compile(r"[^aeiou]y$", re.IGNORECASE)


def pluralize(word: str) -> str:
    """Pluralize the last word of a label: Class -> Classes, Category -> Categories."""
    if not word:
        return word
    if _CONSONANT_Y_RE.search(word):
        return word[:-1] + "ies"
    if any(word.lower().endswith(suffix) for suffix in ("s", "x", "z", "ch", "sh")):
        return word + "es"
    return word + "s"
