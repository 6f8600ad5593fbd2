"""Assembly of flat declaration records into the documentation forest.

The builder turns the introspection tool's flat, ordered record list into a
DeclarationTree:

1. every record becomes a Declaration and is linked to its lexical container
   (``parent_in_code``);
2. section marks are propagated to the siblings that follow them;
3. the code forest is filtered by access level, subtree-wide;
4. surviving fragments of the same type (the primary declaration plus its
   extensions or categories) are merged onto one canonical node;
5. the documentation forest is planned, grouped into per-module category
   pages, and finally frozen.

Given the same records and configuration the result is identical, including
child order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from sourcedoc.access_filter import prune
from sourcedoc.declaration import Declaration
from sourcedoc.declaration_tree import DeclarationTree
from sourcedoc.declaration_type import DeclarationType
from sourcedoc.doc_config import DocConfig
from sourcedoc.doc_layout import DocLayout
from sourcedoc.kind import EXTENSION_BASE_KINDS, Kind
from sourcedoc.pluralize import pluralize
from sourcedoc.source_mark import SourceMark
from sourcedoc.tree_assembly_error import TreeAssemblyError

logger = logging.getLogger(__name__)

# Root name used when no module name is known for top-level declarations.
DEFAULT_ROOT_NAME = "Reference"


class TreeBuilder:
    """Builds a frozen DeclarationTree from introspection records."""

    def __init__(
        self,
        config: DocConfig,
        inflect: Callable[[str], str] = pluralize,
    ) -> None:
        """Initialize the builder with the run configuration and a pluralizer."""
        self.config = config
        self.inflect = inflect

    def build(self, records: Iterable[dict[str, Any]]) -> DeclarationTree:
        """Run every assembly step and return the finished tree."""
        tree = DeclarationTree()
        code_children, implicit_levels = self._load(tree, records)
        self._check_acyclic(tree)
        self._resolve_doc_modules(tree)
        self._assign_marks(tree, code_children)
        self._derive_extension_levels(tree, code_children, implicit_levels)

        visible = prune(
            self._code_layout(tree, code_children), tree, self.config.min_acl
        )
        fragments = self._merge_fragments(tree, set(visible.reachable()))
        layout = self._plan(tree, visible, fragments)
        layout = self._group_top_level(tree, layout)
        self._freeze(tree, layout)

        logger.info(
            "Built documentation tree: %d declarations, %d roots",
            len(tree),
            len(layout.roots),
        )
        return tree

    # -----------------------------
    # Loading and code links
    # -----------------------------

    def _load(
        self,
        tree: DeclarationTree,
        records: Iterable[dict[str, Any]],
    ) -> tuple[dict[int, list[int]], list[int]]:
        """Create declarations and link each one to its lexical container.

        Also returns the extensions whose record gave no access level.
        """
        ids: dict[str, int] = {}
        pending: list[tuple[int, str]] = []
        implicit_levels: list[int] = []
        for record in records:
            decl = Declaration.from_record(record)
            if decl.type.name is None and not decl.type.is_mark:
                logger.debug("Unknown kind %r for %r", decl.type.kind, decl.name)
            index = tree.add(decl)
            record_id = decl.record_id if decl.record_id is not None else f"#{index}"
            if record_id in ids:
                msg = f"Duplicate declaration id: {record_id!r}"
                raise TreeAssemblyError(msg)
            ids[record_id] = index
            if decl.type.is_extension and not record.get("accessibility"):
                implicit_levels.append(index)
            parent = record.get("parent")
            if parent is not None:
                pending.append((index, str(parent)))

        code_children: dict[int, list[int]] = {}
        for index, parent_id in pending:
            parent = ids.get(parent_id)
            if parent is None:
                msg = (
                    f"Declaration {tree[index].name!r} refers to unknown "
                    f"parent {parent_id!r}"
                )
                raise TreeAssemblyError(msg)
            tree.link_code_parent(index, parent)
            code_children.setdefault(parent, []).append(index)
        return code_children, implicit_levels

    def _check_acyclic(self, tree: DeclarationTree) -> None:
        """Fail if following parent_in_code ever loops back on itself."""
        resolved: set[int] = set()
        for start in range(len(tree)):
            path: list[int] = []
            on_path: set[int] = set()
            index: int | None = start
            while index is not None and index not in resolved:
                if index in on_path:
                    msg = f"Cycle in declaration nesting at {tree[index].name!r}"
                    raise TreeAssemblyError(msg)
                on_path.add(index)
                path.append(index)
                parent = tree[index].parent_in_code
                index = parent.index if parent else None
            resolved.update(path)

    def _resolve_doc_modules(self, tree: DeclarationTree) -> None:
        """Fill in missing documentation modules, outermost first."""
        default = self.config.modules[0] if self.config.modules else None
        for node in tree:
            for decl in node.namespace_path:
                if decl.doc_module_name is not None or decl.type.is_markdown:
                    continue
                parent = decl.parent_in_code
                if parent is not None and parent.doc_module_name is not None:
                    decl.doc_module_name = parent.doc_module_name
                elif decl.module_name and self.config.module_name(decl.module_name):
                    decl.doc_module_name = decl.module_name
                else:
                    decl.doc_module_name = default or decl.module_name

    def _assign_marks(
        self,
        tree: DeclarationTree,
        code_children: dict[int, list[int]],
    ) -> None:
        """Give each declaration the section mark that precedes it."""
        for parent, children in code_children.items():
            current = tree[parent].mark_for_children
            for index in children:
                child = tree[index]
                if child.type.is_mark:
                    if child.type.is_task_mark(child.name):
                        current = SourceMark.from_comment(child.name)
                    continue
                child.mark = current

    def _derive_extension_levels(
        self,
        tree: DeclarationTree,
        code_children: dict[int, list[int]],
        implicit_levels: list[int],
    ) -> None:
        """Give extensions without a stated level the widest level of their members."""
        for index in implicit_levels:
            levels = [
                tree[c].access_control_level
                for c in code_children.get(index, [])
                if not tree[c].type.is_mark
            ]
            if levels:
                tree[index].access_control_level = max(levels)

    # -----------------------------
    # Access filtering
    # -----------------------------

    def _candidate(self, decl: Declaration) -> bool:
        """Whether the declaration can appear in the documentation at all."""
        if decl.type.is_mark:
            return decl.type.is_task_mark(decl.name)
        return decl.type.should_document or decl.type.is_markdown

    def _code_layout(
        self,
        tree: DeclarationTree,
        code_children: dict[int, list[int]],
    ) -> DocLayout:
        """Forest of documentable declarations following parent_in_code."""
        layout = DocLayout()
        for decl in tree:
            if not self._candidate(decl):
                continue
            children = [
                c for c in code_children.get(decl.index, []) if self._candidate(tree[c])
            ]
            if children:
                layout.children[decl.index] = children
            if decl.parent_in_code is None and not decl.type.is_mark:
                layout.roots.append(decl.index)
        return layout

    # -----------------------------
    # Extension merging
    # -----------------------------

    def _merge_key(self, decl: Declaration) -> str:
        """Identity shared by every fragment of one entity.

        Swift fragments of a type share its USR. Otherwise fragments are
        matched by module and qualified base name.
        """
        if decl.is_swift and decl.usr:
            return decl.usr
        ancestors = [a.name for a in decl.namespace_ancestors]
        name = ".".join([*ancestors, decl.base_type_name])
        return f"{decl.doc_module_name or ''}|{name}"

    def _merge_fragments(
        self,
        tree: DeclarationTree,
        visible: set[int],
    ) -> dict[int, list[int]]:
        """Merge same-type fragments; return canonical index -> fragment indices."""
        groups: dict[str, list[int]] = {}
        for decl in tree:
            if decl.index not in visible:
                continue
            t = decl.type
            if not (t.is_swift_extensible or t.is_objc_class or t.is_extension):
                continue
            groups.setdefault(self._merge_key(decl), []).append(decl.index)

        fragments: dict[int, list[int]] = {}
        for members in groups.values():
            primaries = [i for i in members if not tree[i].type.is_extension]
            extensions = [i for i in members if tree[i].type.is_extension]
            if not primaries:
                canonical = extensions[0]
                tree[canonical].undocumented_base = True
                logger.debug(
                    "Base type of extension %r is not documented",
                    tree[canonical].fully_qualified_name,
                )
                targets = dict.fromkeys(extensions[1:], canonical)
            else:
                targets = self._merge_targets(tree, primaries, extensions)

            for i, canonical in targets.items():
                tree[i].merged_into = canonical
                fragments.setdefault(canonical, []).append(i)
        return fragments

    def _merge_targets(
        self,
        tree: DeclarationTree,
        primaries: list[int],
        extensions: list[int],
    ) -> dict[int, int]:
        """Map each absorbed fragment to the primary it merges into."""
        first = primaries[0]
        name = tree[first].fully_qualified_name
        kinds = {tree[i].type.kind for i in primaries}
        if len(kinds) > 1:
            logger.warning(
                "Declarations named %r have different kinds (%s); "
                "keeping them separate",
                name,
                ", ".join(sorted(kinds)),
            )
        # One primary per kind; repeated primaries of a kind merge into the first.
        by_kind: dict[str, int] = {}
        targets: dict[int, int] = {}
        for i in primaries:
            kind = tree[i].type.kind
            if kind in by_kind:
                targets[i] = by_kind[kind]
            else:
                by_kind[kind] = i

        for i in extensions:
            bases = EXTENSION_BASE_KINDS.get(tree[i].type.kind, frozenset())
            matching = [p for k, p in by_kind.items() if k in bases]
            if matching:
                targets[i] = matching[0]
                continue
            if len(by_kind) > 1:
                logger.warning(
                    "Extension of %r matches several kinds; merging into %s",
                    name,
                    tree[first].type.kind,
                )
            targets[i] = first
        return dict(sorted(targets.items()))

    # -----------------------------
    # Documentation forest
    # -----------------------------

    def _ordered(self, tree: DeclarationTree, indices: list[int]) -> list[int]:
        """Input order, stable-sorted by navigation hint when any is given.

        Marks keep their place; only the declarations of each section between
        marks are reordered.
        """
        if not any(tree[i].nav_order is not None for i in indices):
            return indices
        out: list[int] = []
        section: list[int] = []
        for i in indices:
            if tree[i].type.is_mark:
                out.extend(self._by_hint(tree, section))
                out.append(i)
                section = []
            else:
                section.append(i)
        out.extend(self._by_hint(tree, section))
        return out

    def _by_hint(self, tree: DeclarationTree, indices: list[int]) -> list[int]:
        """Hinted declarations first, by hint; unhinted ones after, in order."""
        return sorted(
            indices,
            key=lambda i: (tree[i].nav_order is None, tree[i].nav_order or 0),
        )

    def _plan(
        self,
        tree: DeclarationTree,
        visible: DocLayout,
        fragments: dict[int, list[int]],
    ) -> DocLayout:
        """Lay out the visible declarations with fragments merged, before grouping."""
        layout = DocLayout()
        for index in visible.reachable():
            if tree[index].merged_into is not None:
                continue
            owners = [index, *fragments.get(index, [])]
            children = [
                c
                for owner in owners
                for c in visible.children.get(owner, [])
                if tree[c].merged_into is None
            ]
            if children:
                layout.children[index] = self._ordered(tree, children)
        layout.roots = [r for r in visible.roots if tree[r].merged_into is None]
        return layout

    def _category_of(self, decl: Declaration) -> DeclarationType | None:
        """Type whose category page lists this top-level declaration."""
        if decl.type.is_extension:
            return DeclarationType(Kind.SWIFT_EXTENSION.value)
        if decl.type.name is None:
            return None
        return decl.type

    def _group_top_level(self, tree: DeclarationTree, layout: DocLayout) -> DocLayout:
        """Group top-level declarations by module, then by category."""
        guides: list[int] = []
        by_module: dict[str, list[int]] = {m: [] for m in self.config.modules}
        for index in layout.roots:
            decl = tree[index]
            if decl.type.is_markdown:
                guides.append(index)
                continue
            by_module.setdefault(decl.doc_module_name or "", []).append(index)

        position: dict[str, int] = {}
        for pos, t in enumerate(DeclarationType.all()):
            position.setdefault(t.name or "", pos)

        roots = list(guides)
        for module, members in by_module.items():
            categories: dict[str, tuple[DeclarationType, list[int]]] = {}
            for index in members:
                category = self._category_of(tree[index])
                if category is None or category.name is None:
                    logger.debug(
                        "Skipping top-level %r of unknown kind %r",
                        tree[index].name,
                        tree[index].type.kind,
                    )
                    continue
                categories.setdefault(category.name, (category, []))[1].append(index)
            if not categories:
                continue

            group_indices = []
            ordered = sorted(categories, key=lambda n: position.get(n, len(position)))
            for name in ordered:
                category, items = categories[name]
                group = Declaration.group(
                    category.plural_name(self.inflect) or name,
                    category.plural_url_name(self.inflect),
                )
                group.doc_module_name = module or None
                group_index = tree.add(group)
                layout.children[group_index] = self._ordered(tree, items)
                group_indices.append(group_index)

            root = Declaration.group(module or DEFAULT_ROOT_NAME)
            root.doc_module_name = module or None
            root_index = tree.add(root)
            layout.children[root_index] = group_indices
            roots.append(root_index)

        layout.roots = roots
        return layout

    def _freeze(self, tree: DeclarationTree, layout: DocLayout) -> None:
        """Write the planned links into the tree; they cannot change afterwards."""
        for index in layout.reachable():
            children = layout.children.get(index)
            if children:
                tree.set_children(index, children)
        tree.set_roots(layout.roots)
