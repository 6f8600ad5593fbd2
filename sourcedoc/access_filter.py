"""Removal of declarations below the configured visibility threshold."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sourcedoc.doc_layout import DocLayout

if TYPE_CHECKING:
    from sourcedoc.access_level import AccessLevel
    from sourcedoc.declaration_tree import DeclarationTree

logger = logging.getLogger(__name__)


def prune(
    layout: DocLayout,
    tree: DeclarationTree,
    min_level: AccessLevel,
) -> DocLayout:
    """Return a copy of ``layout`` without nodes below ``min_level``.

    Removing a node removes its whole subtree: a descendant above the threshold
    is not kept once an ancestor is removed. Overview and mark nodes are never
    removed for their level; an overview goes away when it ends up with no
    children, and a mark when no declaration is left in its section.
    """
    children: dict[int, list[int]] = {}
    removed = 0

    def keep(index: int) -> bool:
        nonlocal removed
        node = tree[index]
        structural = node.type.is_overview or node.type.is_mark
        if not structural and node.access_control_level < min_level:
            removed += 1
            return False
        kept = _drop_empty_sections(
            [c for c in layout.children.get(index, []) if keep(c)],
            tree,
        )
        if node.type.is_overview and not kept:
            return False
        if index in layout.children:
            children[index] = kept
        return True

    roots = _drop_empty_sections([r for r in layout.roots if keep(r)], tree)
    logger.debug("Access filter (%s) removed %d subtrees", min_level.label, removed)
    return DocLayout(roots=roots, children=children)


def _drop_empty_sections(siblings: list[int], tree: DeclarationTree) -> list[int]:
    """Drop marks followed by no declaration before the next mark."""
    out: list[int] = []
    section_has_content = False
    for i in reversed(siblings):
        if tree[i].type.is_mark:
            if section_has_content:
                out.append(i)
            section_has_content = False
        else:
            out.append(i)
            section_has_content = True
    out.reverse()
    return out
