"""Classification of raw declaration kinds into documentation categories."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from sourcedoc.fixup_kind import fixup_kind
from sourcedoc.kind import DECLARATION_PREFIXES, SWIFT_EXTENSIBLE_KINDS, Kind
from sourcedoc.kind_info import KIND_TABLE, KindInfo
from sourcedoc.pluralize import pluralize

if TYPE_CHECKING:
    from collections.abc import Callable

_SWIFT_EXTENSION_RE = re.compile(r"^source\.lang\.swift\.decl\.extension")


class DeclarationType:
    """The documentation category of a declaration, keyed by its raw kind.

    Unknown kinds are valid: they classify to a type whose ``name`` is None,
    which keeps them out of the category index and every "global" or
    "declarable" predicate.
    """

    __slots__ = ("_info", "kind")

    def __init__(self, kind: str, declaration: str | None = None) -> None:
        """Classify ``kind``, correcting it from ``declaration`` when given."""
        kind = fixup_kind(kind.value if isinstance(kind, Kind) else kind, declaration)
        self.kind: str = kind
        self._info: KindInfo | None = KIND_TABLE.get(kind)

    @classmethod
    def all(cls) -> list[DeclarationType]:
        """Return one type per documentable table entry, in table order."""
        types = [cls(kind) for kind in KIND_TABLE]
        return [t for t in types if t.name is not None]

    @classmethod
    def overview(cls) -> DeclarationType:
        return cls(Kind.OVERVIEW.value)

    @classmethod
    def markdown(cls) -> DeclarationType:
        return cls(Kind.MARKDOWN.value)

    # -----------------------------
    # Display metadata
    # -----------------------------

    @property
    def name(self) -> str | None:
        return self._info.name if self._info else None

    @property
    def dash_type(self) -> str | None:
        return self._info.dash if self._info else None

    @property
    def url_name(self) -> str | None:
        """Name of the type's URL subdirectory, kept for link stability."""
        if not self._info:
            return None
        return self._info.url or self._info.name

    @property
    def is_global(self) -> bool:
        """Whether this kind gets its own page with separate global declarations."""
        return bool(self._info and self._info.is_global)

    def plural_name(self, inflect: Callable[[str], str] = pluralize) -> str | None:
        return inflect(self.name) if self.name else None

    def plural_url_name(self, inflect: Callable[[str], str] = pluralize) -> str | None:
        return inflect(self.url_name) if self.url_name else None

    @property
    def name_controlled_manually(self) -> bool:
        # Swift and Objective-C kinds both start with "source"; navigation
        # groups and guides do not.
        return not self.kind.startswith("source")

    # -----------------------------
    # Predicates
    # -----------------------------

    @property
    def is_objc_mark(self) -> bool:
        return self.kind == Kind.OBJC_MARK

    @property
    def is_swift_mark(self) -> bool:
        """Covers MARK:, TODO: and FIXME: comments."""
        return self.kind == Kind.SWIFT_MARK

    @property
    def is_mark(self) -> bool:
        return self.is_objc_mark or self.is_swift_mark

    def is_task_mark(self, name: str) -> bool:
        """Whether a mark with this name starts a new task section."""
        return self.is_objc_mark or (self.is_swift_mark and name.startswith("MARK: "))

    @property
    def is_objc_enum(self) -> bool:
        return self.kind == Kind.OBJC_ENUM

    @property
    def is_objc_typedef(self) -> bool:
        return self.kind == Kind.OBJC_TYPEDEF

    @property
    def is_objc_category(self) -> bool:
        return self.kind == Kind.OBJC_CATEGORY

    @property
    def is_objc_class(self) -> bool:
        return self.kind == Kind.OBJC_CLASS

    @property
    def is_objc_unexposed(self) -> bool:
        return self.kind == Kind.OBJC_UNEXPOSED

    @property
    def is_swift(self) -> bool:
        return "swift" in self.kind

    @property
    def is_swift_enum_case(self) -> bool:
        return self.kind == Kind.SWIFT_ENUM_CASE

    @property
    def is_swift_enum_element(self) -> bool:
        return self.kind == Kind.SWIFT_ENUM_ELEMENT

    @property
    def is_declaration(self) -> bool:
        return self.kind.startswith(DECLARATION_PREFIXES)

    @property
    def is_param(self) -> bool:
        # The introspection tool reports initializer parameters as local
        # variables, so both kinds mean "parameter" here.
        return self.kind in (Kind.SWIFT_PARAMETER, Kind.SWIFT_LOCAL_VARIABLE)

    @property
    def is_generic_type_param(self) -> bool:
        return self.kind == Kind.SWIFT_GENERIC_TYPE_PARAM

    @property
    def should_document(self) -> bool:
        return (
            self.name is not None
            and self.is_declaration
            and not self.is_param
            and not self.is_generic_type_param
        )

    @property
    def is_swift_extension(self) -> bool:
        return bool(_SWIFT_EXTENSION_RE.match(self.kind))

    @property
    def is_extension(self) -> bool:
        return self.is_swift_extension or self.is_objc_category

    @property
    def is_swift_extensible(self) -> bool:
        return self.kind in SWIFT_EXTENSIBLE_KINDS

    @property
    def is_swift_protocol(self) -> bool:
        return self.kind == Kind.SWIFT_PROTOCOL

    @property
    def is_swift_typealias(self) -> bool:
        return self.kind == Kind.SWIFT_TYPEALIAS

    @property
    def is_swift_global_function(self) -> bool:
        return self.kind == Kind.SWIFT_FREE_FUNCTION

    @property
    def is_swift_variable(self) -> bool:
        return self.kind.startswith("source.lang.swift.decl.var")

    @property
    def is_overview(self) -> bool:
        return self.kind == Kind.OVERVIEW

    @property
    def is_markdown(self) -> bool:
        return self.kind == Kind.MARKDOWN

    # -----------------------------
    # Identity
    # -----------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DeclarationType):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        return f"DeclarationType({self.kind!r})"


def classify(kind: str, declaration: str | None = None) -> DeclarationType:
    """Classify a raw kind string; never fails, unknown kinds have no name."""
    return DeclarationType(kind, declaration)
