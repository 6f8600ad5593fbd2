"""Data model for the output location of a documented node."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageAssignment:
    """Where a node is rendered."""

    title: str
    url: str  # e.g. Classes/Foo.html or Classes/Foo.html#/s:3Foo3barSiv
    filename: str | None = None  # Set only for nodes with their own page
    category_label: str | None = None  # Plural label of the node's type

    @property
    def is_page(self) -> bool:
        return self.filename is not None
