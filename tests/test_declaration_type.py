"""Tests for kind classification and the declaration type predicates."""

from sourcedoc.declaration_type import DeclarationType, classify
from sourcedoc.kind import Kind
from sourcedoc.kind_info import KIND_TABLE

ACTOR_DECL = (
    "<syntaxtype.keyword>actor</syntaxtype.keyword> "
    "<decl.name>Worker</decl.name>"
)


def test_classify_is_deterministic() -> None:
    """Verify that classifying the same input twice gives equal results."""
    a = classify(Kind.SWIFT_STRUCT.value, "struct Foo")
    b = classify(Kind.SWIFT_STRUCT.value, "struct Foo")
    assert a == b
    assert a.name == b.name == "Structure"


def test_unknown_kind_has_no_name() -> None:
    """Verify that unknown kinds classify to an undocumentable type."""
    t = classify("source.lang.swift.decl.mystery")
    assert t is not None
    assert t.name is None
    assert t.dash_type is None
    assert t.url_name is None
    assert t.plural_name() is None
    assert not t.is_global
    assert not t.should_document


def test_actor_correction() -> None:
    """Verify that classes declared with the actor keyword become actors."""
    actor = classify(Kind.SWIFT_CLASS.value, ACTOR_DECL)
    assert actor.kind == Kind.SWIFT_ACTOR
    assert actor.dash_type == "Actor"
    assert actor.is_swift_extensible

    plain = classify(
        Kind.SWIFT_CLASS.value,
        "<syntaxtype.keyword>class</syntaxtype.keyword> Worker",
    )
    assert plain.dash_type == "Class"
    assert classify(Kind.SWIFT_CLASS.value).dash_type == "Class"

    # Only class kinds are corrected
    assert classify(Kind.SWIFT_STRUCT.value, ACTOR_DECL).kind == Kind.SWIFT_STRUCT


def test_equality_and_hash_follow_kind() -> None:
    """Verify that types compare and hash by their raw kind only."""
    a = DeclarationType(Kind.SWIFT_CLASS.value)
    b = DeclarationType(Kind.SWIFT_CLASS.value, "class Foo")
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != DeclarationType(Kind.OBJC_CLASS.value)
    assert DeclarationType(Kind.SWIFT_ENUM) == DeclarationType(Kind.SWIFT_ENUM.value)


def test_all_skips_unnamed_and_keeps_table_order() -> None:
    """Verify that all() lists documentable kinds in table order."""
    types = DeclarationType.all()
    assert all(t.name is not None for t in types)
    assert types[0] == DeclarationType.markdown()
    assert DeclarationType.overview() not in types
    assert len(types) == len(KIND_TABLE) - 1
    kinds = [t.kind for t in types]
    assert kinds.index(Kind.OBJC_CLASS) < kinds.index(Kind.SWIFT_ACTOR)


def test_url_and_plural_names() -> None:
    """Verify URL names default to display names and pluralize correctly."""
    struct = DeclarationType(Kind.SWIFT_STRUCT.value)
    assert struct.url_name == "Struct"
    assert struct.plural_name() == "Structures"
    assert struct.plural_url_name() == "Structs"

    cls = DeclarationType(Kind.SWIFT_CLASS.value)
    assert cls.url_name == "Class"
    assert cls.plural_name() == "Classes"

    alias = DeclarationType(Kind.SWIFT_TYPEALIAS.value)
    assert alias.plural_name() == "Type Aliases"
    assert alias.plural_url_name() == "Typealiases"

    assert DeclarationType(Kind.OBJC_CATEGORY.value).plural_name() == "Categories"


def test_plural_name_uses_injected_inflector() -> None:
    """Verify that a custom pluralizer replaces the default one."""
    t = DeclarationType(Kind.SWIFT_PROTOCOL.value)
    assert t.plural_name(lambda w: w.upper()) == "PROTOCOL"


def test_param_like_kinds() -> None:
    """Verify that parameters and local variables are both parameters."""
    for kind in (Kind.SWIFT_PARAMETER, Kind.SWIFT_LOCAL_VARIABLE):
        t = DeclarationType(kind.value)
        assert t.is_param
        assert t.is_swift_variable
        assert not t.should_document

    generic = DeclarationType(Kind.SWIFT_GENERIC_TYPE_PARAM.value)
    assert generic.is_generic_type_param
    assert not generic.should_document

    assert DeclarationType(Kind.SWIFT_INSTANCE_METHOD.value).should_document
    assert DeclarationType(Kind.OBJC_PROPERTY.value).should_document


def test_mark_predicates() -> None:
    """Verify mark and task-mark detection."""
    swift_mark = DeclarationType(Kind.SWIFT_MARK.value)
    assert swift_mark.is_mark
    assert swift_mark.is_task_mark("MARK: - Lifecycle")
    assert not swift_mark.is_task_mark("TODO: tidy up")
    assert not swift_mark.should_document

    objc_mark = DeclarationType(Kind.OBJC_MARK.value)
    assert objc_mark.is_mark
    assert objc_mark.is_task_mark("Lifecycle")


def test_extension_predicates() -> None:
    """Verify extension, category and extensible kind predicates."""
    ext = DeclarationType(Kind.SWIFT_EXTENSION.value)
    assert ext.is_extension
    assert ext.is_swift_extension
    assert not ext.is_swift_extensible

    assert DeclarationType(Kind.SWIFT_STRUCT_EXTENSION.value).is_swift_extension

    category = DeclarationType(Kind.OBJC_CATEGORY.value)
    assert category.is_extension
    assert category.is_objc_category
    assert not category.is_swift_extension

    for kind in (
        Kind.SWIFT_CLASS,
        Kind.SWIFT_STRUCT,
        Kind.SWIFT_PROTOCOL,
        Kind.SWIFT_ENUM,
        Kind.SWIFT_ACTOR,
    ):
        assert DeclarationType(kind.value).is_swift_extensible
    assert not DeclarationType(Kind.OBJC_CLASS.value).is_swift_extensible
    assert not DeclarationType(Kind.SWIFT_TYPEALIAS.value).is_swift_extensible


def test_dialect_and_misc_predicates() -> None:
    """Verify language, global and manual-name predicates."""
    assert DeclarationType(Kind.SWIFT_FREE_FUNCTION.value).is_swift_global_function
    assert DeclarationType(Kind.SWIFT_FREE_FUNCTION.value).is_global
    assert not DeclarationType(Kind.SWIFT_INSTANCE_METHOD.value).is_global
    assert DeclarationType(Kind.SWIFT_PROTOCOL.value).is_swift_protocol
    assert DeclarationType(Kind.SWIFT_TYPEALIAS.value).is_swift_typealias

    assert DeclarationType(Kind.OBJC_ENUM.value).is_objc_enum
    assert DeclarationType(Kind.OBJC_TYPEDEF.value).is_objc_typedef
    assert DeclarationType(Kind.OBJC_CLASS.value).is_objc_class
    assert not DeclarationType(Kind.OBJC_CLASS.value).is_swift
    assert DeclarationType(Kind.SWIFT_CLASS.value).is_swift

    assert DeclarationType.overview().name_controlled_manually
    assert DeclarationType.markdown().name_controlled_manually
    assert DeclarationType.overview().dash_type == "Section"
    assert not DeclarationType(Kind.SWIFT_CLASS.value).name_controlled_manually
