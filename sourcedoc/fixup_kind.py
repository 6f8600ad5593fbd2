"""Contextual correction of a declaration's kind from its declaration text."""

from sourcedoc.kind import Kind

# The introspection tool reports actors as classes. The only trace of the
# `actor` keyword is in the syntax-highlighted declaration markup, so this
# breaks if that markup format changes upstream.
ACTOR_KEYWORD_MARKUP = "<syntaxtype.keyword>actor</syntaxtype.keyword>"


def fixup_kind(kind: str, declaration: str | None) -> str:
    """Return the kind to classify, improved from the full declaration."""
    if declaration and kind == Kind.SWIFT_CLASS and ACTOR_KEYWORD_MARKUP in declaration:
        return Kind.SWIFT_ACTOR.value
    return kind
