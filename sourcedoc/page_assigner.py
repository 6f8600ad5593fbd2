"""Computation of output file names and URLs for a finished tree."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from sourcedoc.declaration_type import DeclarationType
from sourcedoc.member_anchor import member_anchor
from sourcedoc.page_assignment import PageAssignment
from sourcedoc.page_filename import page_filename
from sourcedoc.pluralize import pluralize

if TYPE_CHECKING:
    from sourcedoc.declaration import Declaration
    from sourcedoc.declaration_tree import DeclarationTree
    from sourcedoc.doc_config import DocConfig

logger = logging.getLogger(__name__)

INDEX_FILENAME = "index"


def category_index(
    inflect: Callable[[str], str] = pluralize,
) -> list[tuple[str, str]]:
    """Plural ``(label, url segment)`` pairs for the top-level category index."""
    seen: set[str] = set()
    out: list[tuple[str, str]] = []
    for t in DeclarationType.all():
        label = t.plural_name(inflect)
        url = t.plural_url_name(inflect)
        if label is None or url is None or label in seen:
            continue
        seen.add(label)
        out.append((label, url))
    return out


class PageAssigner:
    """Assigns every node of the documentation forest an output location.

    Nodes rendered as pages get a file named after ``docs_filename`` inside
    their page parent's directory; other nodes get an anchor on the nearest
    page above them. File names are unique among siblings.
    """

    def __init__(
        self,
        config: DocConfig,
        inflect: Callable[[str], str] = pluralize,
    ) -> None:
        """Initialize the assigner with the run configuration and a pluralizer."""
        self.config = config
        self.inflect = inflect

    def assign(self, tree: DeclarationTree) -> dict[int, PageAssignment]:
        """Return node index -> assignment for every node in the forest."""
        pages: dict[int, PageAssignment] = {}
        used: set[str] = set()
        for root in tree.roots:
            if root.type.is_overview:
                self._assign_module_root(root, used, pages)
            else:
                self._assign_node(root, "", None, used, pages)
        logger.info(
            "Assigned %d locations (%d pages)",
            len(pages),
            sum(1 for p in pages.values() if p.is_page),
        )
        return pages

    def _prefixed(self, url: str) -> str:
        return f"{self.config.api_root}/{url}" if self.config.api_root else url

    def _assign_module_root(
        self,
        root: Declaration,
        used: set[str],
        pages: dict[int, PageAssignment],
    ) -> None:
        """Module roots are the index page of their directory."""
        if self.config.multiple_modules:
            dirname = self._unique(page_filename(root.name), used, root)
            directory = f"{dirname}/"
        else:
            self._unique(INDEX_FILENAME, used, root)
            directory = ""
        url = f"{directory}{INDEX_FILENAME}.html"
        pages[root.index] = PageAssignment(
            title=root.name,
            url=self._prefixed(url),
            filename=INDEX_FILENAME,
        )
        self._assign_children(root, directory, url, pages)

    def _assign_children(
        self,
        parent: Declaration,
        directory: str,
        parent_url: str,
        pages: dict[int, PageAssignment],
    ) -> None:
        used: set[str] = set()
        for child in parent.children:
            self._assign_node(child, directory, parent_url, used, pages)

    def _assign_node(
        self,
        node: Declaration,
        directory: str,
        parent_url: str | None,
        used: set[str],
        pages: dict[int, PageAssignment],
    ) -> None:
        label = node.type.plural_name(self.inflect)
        # Guides are always pages, even though they never have children.
        is_page = (
            node.render_as_page(self.config)
            or node.type.is_markdown
            or parent_url is None
        )
        if is_page:
            filename = self._unique(page_filename(node.docs_filename), used, node)
            url = f"{directory}{filename}.html"
            pages[node.index] = PageAssignment(
                title=node.name,
                url=self._prefixed(url),
                filename=filename,
                category_label=label,
            )
            self._assign_children(node, f"{directory}{filename}/", url, pages)
            return

        url = f"{parent_url}#{member_anchor(node)}"
        pages[node.index] = PageAssignment(
            title=node.name,
            url=self._prefixed(url),
            category_label=label,
        )

    def _unique(self, candidate: str, used: set[str], node: Declaration) -> str:
        """Return ``candidate`` or a numbered variant not yet used in this scope.

        Comparison ignores case.
        """
        result = candidate
        n = 2
        while result.casefold() in used:
            result = f"{candidate}-{n}"
            n += 1
        if result != candidate:
            logger.warning(
                "File name %r for %r is taken; using %r",
                candidate,
                node.fully_qualified_name,
                result,
            )
        used.add(result.casefold())
        return result
