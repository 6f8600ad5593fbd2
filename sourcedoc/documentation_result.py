"""Data model for the output of a documentation build."""

from dataclasses import dataclass

from sourcedoc.abstract_lookup import AbstractLookup
from sourcedoc.declaration import Declaration
from sourcedoc.declaration_tree import DeclarationTree
from sourcedoc.doc_config import DocConfig
from sourcedoc.page_assignment import PageAssignment


@dataclass(frozen=True)
class DocumentationResult:
    """Finished tree plus everything a renderer needs to consume it."""

    config: DocConfig
    tree: DeclarationTree
    pages: dict[int, PageAssignment]
    abstracts: AbstractLookup

    def page_for(self, decl: Declaration) -> PageAssignment | None:
        return self.pages.get(decl.index)
