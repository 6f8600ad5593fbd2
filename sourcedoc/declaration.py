"""Data model for one documentable declaration and its derived attributes."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from sourcedoc.access_level import AccessLevel
from sourcedoc.as_text import as_text
from sourcedoc.declaration_type import DeclarationType
from sourcedoc.source_mark import SourceMark

if TYPE_CHECKING:
    from sourcedoc.abstract_lookup import AbstractLookup
    from sourcedoc.declaration_tree import DeclarationTree
    from sourcedoc.doc_config import DocConfig

SWIFT = "Swift"
OBJC = "Objective-C"


@dataclass(eq=False)
class Declaration:
    """One documentable entity.

    Content fields come from a single input record and are not changed after
    tree assembly. Parent and child links live in the owning DeclarationTree
    and are written exactly once.
    """

    type: DeclarationType
    name: str
    declaration: str = ""
    other_language_declaration: str | None = None
    file: str | None = None
    line: int | None = None
    column: int | None = None
    start_line: int | None = None
    end_line: int | None = None
    usr: str | None = None
    type_usr: str | None = None
    module_name: str | None = None
    # Module under documentation that contains this declaration. Differs
    # from module_name for extensions of other modules' types. None for guides.
    doc_module_name: str | None = None
    objc_name: str | None = None
    access_control_level: AccessLevel = AccessLevel.PUBLIC
    generic_requirements: str | None = None
    inherited_types: list[str] = field(default_factory=list)
    deprecated: bool = False
    deprecation_message: str | None = None
    unavailable: bool = False
    unavailable_message: str | None = None
    abstract: str = ""
    discussion: str = ""
    default_impl_abstract: str | None = None
    from_protocol_extension: bool = False
    is_async: bool = False
    parameters: list[dict[str, Any]] = field(default_factory=list)
    returns: str | None = None
    url_name: str | None = None
    nav_order: int | None = None
    mark: SourceMark = field(default_factory=SourceMark)
    record_id: str | None = None

    # Tree links, owned by DeclarationTree.
    index: int = field(default=-1, init=False, repr=False)
    merged_into: int | None = field(default=None, init=False, repr=False)
    undocumented_base: bool = field(default=False, init=False, repr=False)
    _tree: DeclarationTree | None = field(default=None, init=False, repr=False)
    _parent_in_code: int | None = field(default=None, init=False, repr=False)
    _parent_in_docs: int | None = field(default=None, init=False, repr=False)
    _children: tuple[int, ...] | None = field(default=None, init=False, repr=False)

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Declaration:
        """Build a declaration from one flat introspection record."""
        decl_text = as_text(record.get("declaration"))
        decl_type = DeclarationType(str(record.get("kind") or ""), decl_text)
        name = str(record.get("name") or "")
        nav_order = record.get("nav_order")
        return cls(
            type=decl_type,
            name=name,
            declaration=decl_text,
            other_language_declaration=record.get("other_language_declaration"),
            file=record.get("file"),
            line=record.get("line"),
            column=record.get("column"),
            start_line=record.get("start_line"),
            end_line=record.get("end_line"),
            usr=record.get("usr"),
            type_usr=record.get("type_usr"),
            module_name=record.get("module_name"),
            doc_module_name=record.get("doc_module_name"),
            objc_name=record.get("objc_name"),
            access_control_level=_access_level_for(decl_type, record),
            generic_requirements=record.get("generic_requirements") or None,
            inherited_types=[str(t) for t in record.get("inherited_types") or []],
            deprecated=bool(record.get("deprecated")),
            deprecation_message=record.get("deprecation_message"),
            unavailable=bool(record.get("unavailable")),
            unavailable_message=record.get("unavailable_message"),
            abstract=as_text(record.get("abstract")),
            discussion=as_text(record.get("discussion")),
            default_impl_abstract=record.get("default_impl_abstract"),
            from_protocol_extension=bool(record.get("from_protocol_extension")),
            is_async=bool(record.get("async")),
            parameters=list(record.get("parameters") or []),
            returns=as_text(record.get("return")) or None,
            url_name=record.get("url_name"),
            nav_order=int(nav_order) if nav_order is not None else None,
            record_id=str(record["id"]) if record.get("id") is not None else None,
        )

    @classmethod
    def group(cls, name: str, url_name: str | None = None) -> Declaration:
        """Build a synthetic grouping node."""
        return cls(
            type=DeclarationType.overview(),
            name=name,
            url_name=url_name,
            access_control_level=AccessLevel.OPEN,
        )

    # -----------------------------
    # Links
    # -----------------------------

    def _node(self, index: int | None) -> Declaration | None:
        if index is None or self._tree is None:
            return None
        return self._tree[index]

    @property
    def parent_in_code(self) -> Declaration | None:
        """Element containing this declaration in the code."""
        return self._node(self._parent_in_code)

    @property
    def parent_in_docs(self) -> Declaration | None:
        """Logical parent in the documentation.

        May differ from parent_in_code because of top-level categories and
        merged extensions.
        """
        return self._node(self._parent_in_docs)

    @property
    def children(self) -> tuple[Declaration, ...]:
        if not self._children or self._tree is None:
            return ()
        return tuple(self._tree[i] for i in self._children)

    # -----------------------------
    # Paths and names
    # -----------------------------

    @property
    def namespace_ancestors(self) -> list[Declaration]:
        parent = self.parent_in_code
        return parent.namespace_path if parent else []

    @property
    def namespace_path(self) -> list[Declaration]:
        """Chain of parent_in_code from top level to self, inclusive."""
        return [*self.namespace_ancestors, self]

    @property
    def fully_qualified_name(self) -> str:
        """E.g. ``OuterType.NestedType.method(arg:)``."""
        return ".".join(d.name for d in self.namespace_path)

    @property
    def fully_qualified_name_regexp(self) -> re.Pattern[str]:
        """Match the qualified name allowing generic params after each parent."""
        names = (re.escape(d.name) for d in self.namespace_path)
        return re.compile(r"(?:<.*?>)?\.".join(names))

    @property
    def fully_qualified_module_name_parts(self) -> list[str]:
        path = self.namespace_path
        parts = [path[0].module_name, *(d.name for d in path)]
        return [p for p in parts if p is not None]

    @property
    def fully_qualified_module_name(self) -> str:
        """E.g. ``MyModule.OuterType.NestedType.method(arg:)``."""
        return ".".join(self.fully_qualified_module_name_parts)

    @property
    def docs_path(self) -> list[Declaration]:
        """Chain of parent_in_docs from the root to self, inclusive."""
        parent = self.parent_in_docs
        return [*(parent.docs_path if parent else []), self]

    @property
    def objc_category_name(self) -> list[str] | None:
        """Split ``NSString(MyMethods)`` into ``["NSString", "MyMethods"]``."""
        if not self.type.is_objc_category:
            return None
        parts = re.split(r"[()]", self.name)
        while parts and not parts[-1]:
            parts.pop()
        return parts

    @property
    def base_type_name(self) -> str:
        """Name of the type this declaration extends, or its own name."""
        category = self.objc_category_name
        return category[0] if category else self.name

    @property
    def docs_filename(self) -> str:
        """Base filename (no extension) for the item."""
        result = self.url_name or self.name
        # Free functions may share a name with different argument types,
        # f(a: Int) vs. f(a: String).
        if not self.type.is_swift_global_function:
            return result
        return f"{result}_{self.type_usr or ''}"

    # -----------------------------
    # Language
    # -----------------------------

    @property
    def is_swift(self) -> bool:
        return self.type.is_swift

    @property
    def highlight_language(self) -> str:
        return "swift" if self.is_swift else "objective_c"

    def display_language(self, config: DocConfig) -> str:
        if self.is_swift:
            return SWIFT
        return SWIFT if config.hide_objc else OBJC

    def display_declaration(self, config: DocConfig) -> str | None:
        if self.is_swift:
            return self.declaration
        return self.other_language_declaration if config.hide_objc else self.declaration

    def display_other_language_declaration(self, config: DocConfig) -> str | None:
        if config.hide_objc or config.hide_swift:
            return None
        return self.other_language_declaration

    @property
    def swift_objc_extension(self) -> bool:
        return self.type.is_swift_extension and bool(
            self.usr and self.usr.startswith("c:objc")
        )

    @property
    def swift_extension_objc_name(self) -> str | None:
        if not self.type.is_swift_extension or not self.usr:
            return None
        return self.usr.split("(cs)")[-1]

    # -----------------------------
    # Pages
    # -----------------------------

    def render_as_page(self, config: DocConfig) -> bool:
        """Give the item its own page or just inline into parent?"""
        return bool(self.children) or (
            config.separate_global_declarations and self.type.is_global
        )

    def omit_content_from_parent(self, config: DocConfig) -> bool:
        """Whether the parent links to this item instead of inlining it."""
        return config.separate_global_declarations and self.render_as_page(config)

    # -----------------------------
    # Extensions and marks
    # -----------------------------

    @property
    def constrained_extension(self) -> bool:
        return self.type.is_swift_extension and bool(self.generic_requirements)

    @property
    def mark_for_children(self) -> SourceMark:
        if self.constrained_extension and self.generic_requirements:
            return SourceMark.from_generic_requirements(self.generic_requirements)
        return SourceMark()

    @property
    def usage_discouraged(self) -> bool:
        return self.unavailable or self.deprecated

    @property
    def inherited_types_present(self) -> bool:
        return bool(self.inherited_types)

    def other_inherited_types(self, unwanted: list[str] | set[str]) -> bool:
        """Is there at least one inherited type that is not in ``unwanted``?"""
        return any(t not in unwanted for t in self.inherited_types)

    # -----------------------------
    # Modules
    # -----------------------------

    @property
    def type_from_doc_module(self) -> bool:
        # Older toolchains only set module_name for imported modules, newer
        # ones always set it.
        return not self.type.is_extension or (
            self.is_swift
            and bool(self.usr)
            and (self.module_name is None or self.module_name == self.doc_module_name)
        )

    def extension_of_external_type(self, config: DocConfig) -> bool:
        return self.module_name is not None and not config.module_name(self.module_name)

    def mark_undocumented(self, config: DocConfig) -> bool:
        """Whether to ask the user to document this declaration.

        Types extended from other modules are exempt. Compile errors leave no
        docs and no USR.
        """
        return not self.is_swift or (
            bool(self.usr) and not self.extension_of_external_type(config)
        )

    def ambiguous_module_name(self, group_name: str, config: DocConfig) -> bool:
        """Is it unclear from context what module the top-level item is from?"""
        return self.extension_of_external_type(config) or (
            config.multiple_modules
            and self.module_name is not None
            and group_name != self.module_name
        )

    def need_doc_module_note(self, config: DocConfig) -> bool:
        """Does the reader need help finding which module provides this?"""
        if not config.multiple_modules:
            return False
        if self.docs_path[0].name == self.doc_module_name:
            return False
        parent = self.parent_in_code
        if parent is None:
            # Top-level items with no page of their own
            return not self.render_as_page(config)
        # Members added by extension
        return parent.module_name != self.doc_module_name

    def declaration_note(self, config: DocConfig) -> str | None:
        """Info text shown next to the collapsed item name."""
        notes = [
            "default implementation" if self.default_impl_abstract else None,
            "extension method" if self.from_protocol_extension else None,
            "asynchronous" if self.is_async else None,
            f"from {self.doc_module_name}"
            if self.need_doc_module_note(config)
            else None,
        ]
        text = ", ".join(n for n in notes if n)
        if not text:
            return None
        return text[0].upper() + text[1:]

    def alternative_abstract(self, lookup: AbstractLookup) -> str | None:
        """Overview text from a user file named after this item, if any."""
        return lookup.read(self.name, self.url_name)


def _access_level_for(
    decl_type: DeclarationType,
    record: dict[str, Any],
) -> AccessLevel:
    """Resolve a record's access level, defaulting by language."""
    if decl_type.is_overview or decl_type.is_markdown:
        return AccessLevel.OPEN
    parsed = AccessLevel.from_accessibility(record.get("accessibility"))
    if parsed is not None:
        return parsed
    # Objective-C has no access control: everything in a header is public.
    return AccessLevel.INTERNAL if decl_type.is_swift else AccessLevel.PUBLIC
