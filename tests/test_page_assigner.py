"""Tests for output file names and URLs."""

import logging
from typing import Any

import pytest

from sourcedoc.declaration import Declaration
from sourcedoc.declaration_tree import DeclarationTree
from sourcedoc.declaration_type import DeclarationType
from sourcedoc.doc_config import DocConfig
from sourcedoc.kind import Kind
from sourcedoc.member_anchor import member_anchor
from sourcedoc.page_assigner import PageAssigner, category_index
from sourcedoc.page_assignment import PageAssignment
from sourcedoc.page_filename import page_filename
from sourcedoc.tree_builder import TreeBuilder

PUBLIC = "source.lang.swift.accessibility.public"


def rec(record_id: str, kind: Kind, name: str, **extra: Any) -> dict[str, Any]:
    """Build a public declaration record."""
    return {
        "id": record_id,
        "kind": kind.value,
        "name": name,
        "accessibility": PUBLIC,
        **extra,
    }


def assign(
    records: list[dict[str, Any]],
    config: DocConfig,
) -> tuple[DeclarationTree, dict[int, PageAssignment]]:
    """Build a tree and assign locations for it."""
    tree = TreeBuilder(config).build(records)
    return tree, PageAssigner(config).assign(tree)


def url_of(tree: DeclarationTree, pages: dict[int, PageAssignment], rid: str) -> str:
    """Return the URL assigned to the record with ``rid``."""
    decl = next(d for d in tree if d.record_id == rid)
    return pages[decl.index].url


def test_page_filename() -> None:
    """Verify the escaping of names used as file names."""
    assert page_filename("Foo") == "Foo"
    assert page_filename("init()") == "init()"
    assert page_filename("==(_:_:)") == "%3D%3D(_%3A_%3A)"
    assert page_filename("Getting Started") == "Getting%20Started"
    assert page_filename("") == "Unknown"
    assert page_filename(".") == "%2E"
    assert page_filename("..") == "%2E%2E"


def test_member_anchor() -> None:
    """Verify anchors for inlined declarations."""
    t = DeclarationType(Kind.SWIFT_INSTANCE_METHOD.value)
    assert member_anchor(Declaration(type=t, name="run()", usr="s:3Foo3runyyF")) == (
        "/s:3Foo3runyyF"
    )
    assert member_anchor(Declaration(type=t, name="Hello World!")) == "/hello-world"
    assert member_anchor(Declaration(type=t, name="!!!")) == "/section"


def test_category_index() -> None:
    """Verify plural labels and URL segments for the category index."""
    index = category_index()
    labels = [label for label, _ in index]
    assert index[0] == ("Guides", "Guides")
    assert ("Structures", "Structs") in index
    assert ("Enumerations", "Enums") in index
    assert ("Type Aliases", "Typealiases") in index
    assert len(labels) == len(set(labels))


def test_category_index_uses_injected_inflector() -> None:
    """Verify that a custom pluralizer is honored."""
    index = category_index(lambda word: word + "!")
    assert ("Class!", "Class!") in index


def test_single_module_urls() -> None:
    """Verify URLs of the module index, category pages and members."""
    tree, pages = assign(
        [
            rec("foo", Kind.SWIFT_STRUCT, "Foo"),
            rec("a", Kind.SWIFT_INSTANCE_VARIABLE, "a", parent="foo", usr="s:1a"),
            rec("f", Kind.SWIFT_FREE_FUNCTION, "make()", type_usr="U1"),
        ],
        DocConfig(modules=("MyKit",)),
    )
    root = tree.roots[0]
    assert pages[root.index].url == "index.html"
    assert pages[root.index].is_page
    assert url_of(tree, pages, "foo") == "Structs/Foo.html"
    assert url_of(tree, pages, "a") == "Structs/Foo.html#/s:1a"
    assert url_of(tree, pages, "f") == "Functions.html#/make"

    foo = next(d for d in tree if d.record_id == "foo")
    assert pages[foo.index].category_label == "Structures"
    assert pages[foo.index].filename == "Foo"
    assert not pages[foo.children[0].index].is_page


def test_separate_globals_get_distinct_pages() -> None:
    """Verify that overloaded free functions get their own files."""
    tree, pages = assign(
        [
            rec("f1", Kind.SWIFT_FREE_FUNCTION, "make()", type_usr="U1"),
            rec("f2", Kind.SWIFT_FREE_FUNCTION, "make()", type_usr="U2"),
        ],
        DocConfig(modules=("MyKit",), separate_global_declarations=True),
    )
    assert url_of(tree, pages, "f1") == "Functions/make()_U1.html"
    assert url_of(tree, pages, "f2") == "Functions/make()_U2.html"


def test_sibling_collisions_get_suffix(caplog: pytest.LogCaptureFixture) -> None:
    """Verify case-insensitive uniqueness of file names among siblings."""
    with caplog.at_level(logging.WARNING):
        tree, pages = assign(
            [
                rec("upper", Kind.SWIFT_STRUCT, "Foo"),
                rec("lower", Kind.SWIFT_STRUCT, "foo"),
            ],
            DocConfig(modules=("MyKit",), separate_global_declarations=True),
        )
    assert url_of(tree, pages, "upper") == "Structs/Foo.html"
    assert url_of(tree, pages, "lower") == "Structs/foo-2.html"
    assert "is taken" in caplog.text


def test_multiple_modules_and_api_root() -> None:
    """Verify per-module directories and the URL prefix."""
    tree, pages = assign(
        [
            rec("s", Kind.SWIFT_STRUCT, "Store", module_name="Core"),
            rec("b", Kind.SWIFT_CLASS, "Button", module_name="UI"),
            {"id": "g", "kind": Kind.MARKDOWN.value, "name": "Getting Started"},
        ],
        DocConfig(
            modules=("Core", "UI"),
            separate_global_declarations=True,
            api_root="/docs",
        ),
    )
    guide, core, ui = tree.roots
    assert pages[guide.index].url == "/docs/Getting%20Started.html"
    assert pages[core.index].url == "/docs/Core/index.html"
    assert pages[ui.index].url == "/docs/UI/index.html"
    assert url_of(tree, pages, "s") == "/docs/Core/Structs/Store.html"
    assert url_of(tree, pages, "b") == "/docs/UI/Classes/Button.html"


def test_every_documented_node_is_assigned() -> None:
    """Verify that no node of the forest is left without a location."""
    tree, pages = assign(
        [
            rec("foo", Kind.SWIFT_STRUCT, "Foo"),
            rec("a", Kind.SWIFT_INSTANCE_VARIABLE, "a", parent="foo"),
            rec("e", Kind.SWIFT_EXTENSION, "String", module_name="Swift"),
            rec("m", Kind.SWIFT_INSTANCE_METHOD, "shout()", parent="e"),
        ],
        DocConfig(modules=("MyKit",)),
    )
    assert {d.index for d in tree.walk()} == set(pages)
    assert url_of(tree, pages, "m") == "Extensions/String.html#/shout"
