"""Index-addressed store of declarations and their write-once links."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sourcedoc.tree_assembly_error import TreeAssemblyError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from sourcedoc.declaration import Declaration


class DeclarationTree:
    """Arena holding every declaration of a run.

    Nodes are addressed by index. The code forest (``parent_in_code``) and the
    documentation forest (``parent_in_docs`` / ``children``) are both stored
    as indices, and each link can be written only once.
    """

    def __init__(self) -> None:
        """Create an empty arena."""
        self.nodes: list[Declaration] = []
        self._roots: tuple[int, ...] | None = None

    def __getitem__(self, index: int) -> Declaration:
        return self.nodes[index]

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Declaration]:
        return iter(self.nodes)

    def add(self, decl: Declaration) -> int:
        """Store a declaration and return its index."""
        if decl._tree is not None:  # noqa: SLF001
            msg = f"Declaration {decl.name!r} already belongs to a tree"
            raise TreeAssemblyError(msg)
        index = len(self.nodes)
        decl.index = index
        decl._tree = self  # noqa: SLF001
        self.nodes.append(decl)
        return index

    def link_code_parent(self, child: int, parent: int) -> None:
        """Record the lexical container of ``child``."""
        node = self.nodes[child]
        if node._parent_in_code is not None:  # noqa: SLF001
            msg = f"{node.name!r} already has a parent in code"
            raise TreeAssemblyError(msg)
        node._parent_in_code = parent  # noqa: SLF001

    def set_children(self, parent: int, children: Iterable[int]) -> None:
        """Freeze the documentation children of ``parent``.

        Each child's ``parent_in_docs`` is set in the same step so the two can
        never disagree.
        """
        node = self.nodes[parent]
        if node._children is not None:  # noqa: SLF001
            msg = f"Children of {node.name!r} are already assigned"
            raise TreeAssemblyError(msg)
        frozen = tuple(children)
        for i in frozen:
            child = self.nodes[i]
            has_parent = child._parent_in_docs is not None  # noqa: SLF001
            if has_parent or i in (self._roots or ()):
                msg = f"{child.name!r} already has a parent in the docs"
                raise TreeAssemblyError(msg)
            if i == parent:
                msg = f"{child.name!r} cannot be its own child"
                raise TreeAssemblyError(msg)
        for i in frozen:
            self.nodes[i]._parent_in_docs = parent  # noqa: SLF001
        node._children = frozen  # noqa: SLF001

    def set_roots(self, roots: Iterable[int]) -> None:
        """Freeze the roots of the documentation forest."""
        if self._roots is not None:
            msg = "Roots are already assigned"
            raise TreeAssemblyError(msg)
        frozen = tuple(roots)
        for i in frozen:
            if self.nodes[i]._parent_in_docs is not None:  # noqa: SLF001
                msg = f"Root {self.nodes[i].name!r} has a parent in the docs"
                raise TreeAssemblyError(msg)
        self._roots = frozen

    @property
    def roots(self) -> list[Declaration]:
        return [self.nodes[i] for i in self._roots or ()]

    def walk(self) -> Iterator[Declaration]:
        """Yield the documentation forest depth-first, in child order."""
        stack = list(reversed(self.roots))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find(self, qualified_name: str) -> list[Declaration]:
        """Return documented nodes with the given fully qualified name."""
        return [d for d in self.walk() if d.fully_qualified_name == qualified_name]
