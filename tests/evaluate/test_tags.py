# topmark:header:start
#
#   project      : LitDoc
#   file         : test_tags.py
#   file_relpath : tests/evaluate/test_tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the tag handlers of the evaluation environment."""

from __future__ import annotations

from typing import Any

import pytest

from litdoc.evaluate import (
    Bold,
    CodeBlock,
    ContractViolation,
    Declaration,
    Example,
    Italic,
    Line,
    Link,
    Literal,
    Meta,
    Note,
    OrderedList,
    Paragraph,
    RangeViolation,
    Raw,
    Ref,
    Section,
    SoftBreak,
    Tag,
    TagKind,
    Text,
    UnorderedList,
    VersionNote,
    invoke,
)
from tests.conftest import mark_pipeline, parametrize

# --- Generic values and logic ---------------------------------------------------


@mark_pipeline
def test_tag_and_meta() -> None:
    assert invoke("tag", "custom", [1, 2]) == Tag("custom", [1, 2])
    assert invoke("meta", "owner", "docs") == Meta("owner", "docs")


@mark_pipeline
@parametrize(
    "value, expected",
    [(False, True), (True, False), ([], True), ((), True), ([0], False), ("", False), (0, False)],
)
def test_not(value: Any, expected: bool) -> None:
    assert invoke("not", value) is expected


@mark_pipeline
@parametrize("value, expected", [(True, True), (False, True), (0, False), ("true", False)])
def test_is_boolean(value: Any, expected: bool) -> None:
    assert invoke("boolean?", value) is expected


@mark_pipeline
@parametrize(
    "tag, left, right, expected",
    [
        ("+", 2, 3, 5),
        ("*", 2, 3, 6),
        ("/", 3, 2, 1.5),
        ("<", 1, 2, True),
        ("<=", 2, 2, True),
        (">", 1, 2, False),
        (">=", 2, 3, False),
    ],
)
def test_arithmetic_and_comparison(tag: str, left: int, right: int, expected: Any) -> None:
    assert invoke(tag, left, right) == expected


@mark_pipeline
def test_minus_adds_its_operands() -> None:
    assert invoke("-", 5, 3) == 8
    assert "probable defect" in TagKind.SUBTRACT.description


@mark_pipeline
def test_division_by_zero_is_a_contract_violation() -> None:
    with pytest.raises(ContractViolation) as excinfo:
        invoke("/", 1, 0)
    assert excinfo.value.field == "right"


@mark_pipeline
@parametrize("left, right", [("1", 2), (1, True), (None, 1)])
def test_arithmetic_rejects_non_numbers(left: Any, right: Any) -> None:
    with pytest.raises(ContractViolation):
        invoke("+", left, right)


@mark_pipeline
def test_equality_is_structural() -> None:
    assert invoke("=", [1, Text("a")], (1, Text("a"))) is True
    assert invoke("=", [1, 2], [1, 2, 3]) is False
    assert invoke("=", 1, True) is False


# --- Accessors -------------------------------------------------------------------


@mark_pipeline
def test_symbol_name_returns_node_label() -> None:
    assert invoke("symbol-name", Note("warning", "careful")) == "note"
    assert invoke("symbol-name", Tag("custom", None)) == "custom"


@mark_pipeline
def test_symbol_name_requires_a_node() -> None:
    with pytest.raises(ContractViolation):
        invoke("symbol-name", "not a node")


@mark_pipeline
def test_first_and_last() -> None:
    assert invoke("first", [1, 2, 3]) == 1
    assert invoke("last", [1, 2, 3]) == 3


@mark_pipeline
@parametrize("tag", ["first", "last"])
def test_first_and_last_of_empty_sequence_return_empty(tag: str) -> None:
    assert invoke(tag, []) == ()


@mark_pipeline
def test_nth_in_range() -> None:
    assert invoke("nth", ["a", "b", "c"], 2) == "c"
    assert invoke("nth", ["a", "b", "c"], 0.0) == "a"


@mark_pipeline
@parametrize("index", [3, -1, 1.5])
def test_nth_out_of_range(index: float) -> None:
    with pytest.raises(RangeViolation) as excinfo:
        invoke("nth", ["a", "b", "c"], index)
    assert isinstance(excinfo.value, ContractViolation)
    assert isinstance(excinfo.value, IndexError)


@mark_pipeline
def test_nth_on_empty_sequence_fails() -> None:
    with pytest.raises(RangeViolation):
        invoke("nth", [], 0)


# --- Inline and block nodes ------------------------------------------------------


@mark_pipeline
@parametrize(
    "tag, node_type",
    [
        ("paragraph", Paragraph),
        ("text", Text),
        ("bold", Bold),
        ("italic", Italic),
        ("soft-break", SoftBreak),
        ("line", Line),
    ],
)
def test_inline_nodes_wrap_their_value(tag: str, node_type: type[Any]) -> None:
    node = invoke(tag, "content")
    assert node == node_type("content")
    assert node.label == tag


@mark_pipeline
def test_raw_and_literal() -> None:
    assert invoke("raw", "html", "<br>") == Raw("html", "<br>")
    assert invoke("literal", "as-is") == Literal("as-is")


@mark_pipeline
def test_declaration_and_section() -> None:
    assert invoke("declaration", "module", [Text("x")]) == Declaration("module", (Text("x"),))
    section = invoke("section", "Usage", [])
    assert section == Section("Usage", ())
    assert section.meta == {}


@mark_pipeline
def test_children_must_be_a_sequence() -> None:
    with pytest.raises(ContractViolation) as excinfo:
        invoke("section", "Usage", "not children")
    assert excinfo.value.field == "children"


@mark_pipeline
def test_code_block() -> None:
    node = invoke("code", "js", "let x = 1;")
    assert node == CodeBlock("js", "let x = 1;")
    assert node.label == "code"


@mark_pipeline
def test_example_defaults() -> None:
    assert invoke("example", "js", "f()") == Example("js", "f()", True, None, "Example")


@mark_pipeline
def test_example_options_by_keyword() -> None:
    node = invoke(
        "example", "js", "f()", line_numbers=False, emphasise_lines=[1], caption="Calling f"
    )
    assert node == Example("js", "f()", False, [1], "Calling f")


@mark_pipeline
def test_example_line_numbers_must_be_boolean() -> None:
    with pytest.raises(ContractViolation) as excinfo:
        invoke("example", "js", "f()", "yes")
    assert excinfo.value.field == "line-numbers"


@mark_pipeline
def test_lists() -> None:
    assert invoke("list", ["a", "b"]) == UnorderedList(("a", "b"))
    assert invoke("ordered-list", ["a"]) == OrderedList(("a",))
    assert invoke("list", []).label == "list"


@mark_pipeline
def test_link_and_ref() -> None:
    assert invoke("link", "Home", "https://example.org") == Link(
        url="https://example.org", text="Home"
    )
    assert invoke("ref", "rfc", "https://example.org/rfc") == Ref(
        id="rfc", url="https://example.org/rfc"
    )


@mark_pipeline
def test_note_and_warning_share_a_label() -> None:
    note = invoke("note", "Heads up.")
    warning = invoke("warning", "Careful.")
    assert note == Note("note", "Heads up.")
    assert warning == Note("warning", "Careful.")
    assert note.label == warning.label == "note"


@mark_pipeline
@parametrize(
    "tag, kind",
    [("version-added", "added"), ("version-changed", "changed"), ("deprecated", "deprecated")],
)
def test_version_notes(tag: str, kind: str) -> None:
    assert invoke(tag, "1.2") == VersionNote(kind, "1.2", "")
    assert invoke(tag, "1.2", "Details.") == VersionNote(kind, "1.2", "Details.")


# --- Declarations and metadata ---------------------------------------------------


@mark_pipeline
def test_function_signature() -> None:
    node = invoke("function", "foo(a, b)", [Text("body")])
    assert node == Declaration(
        "function", (Text("body"),), {"name": "foo", "signature": "foo(a, b)"}
    )


@mark_pipeline
@parametrize("tag", ["method", "classmethod"])
def test_method_kinds_use_function_signatures(tag: str) -> None:
    node = invoke(tag, "bar()", [])
    assert node.kind == tag
    assert node.meta == {"name": "bar", "signature": "bar()"}


@mark_pipeline
def test_class_signature_with_parents() -> None:
    node = invoke("class", "Foo(a) < Bar, Baz", [])
    assert node.kind == "class"
    assert node.meta == {"name": "Foo", "signature": "Foo(a)", "parents": "Bar, Baz"}


@mark_pipeline
def test_class_signature_without_parents() -> None:
    assert invoke("class", "Foo(a)", []).meta == {"name": "Foo", "signature": "Foo(a)"}


@mark_pipeline
@parametrize("tag", ["private", "public"])
def test_visibility_markers(tag: str) -> None:
    assert invoke(tag) == Meta(tag, True)


@mark_pipeline
@parametrize(
    "tag", ["name", "type", "portability", "synopsis", "platform", "returns", "signature"]
)
def test_metadata_setters(tag: str) -> None:
    assert invoke(tag, "value") == Meta(tag, "value")


@mark_pipeline
def test_metadata_setters_require_strings() -> None:
    with pytest.raises(ContractViolation) as excinfo:
        invoke("returns", 42)
    assert excinfo.value.tag == "returns"
    assert excinfo.value.field == "block"


@mark_pipeline
def test_throws() -> None:
    assert invoke("throws", "TypeError", "On bad input.") == Meta(
        "throws", {"description": "On bad input.", "name": "TypeError"}
    )


@mark_pipeline
@parametrize("level", ["Stable", "STABLE", "stable"])
def test_stability_is_case_insensitive(level: str) -> None:
    assert invoke("stability", level) == Meta("stability", "stable")


@mark_pipeline
@parametrize("level", ["experimental", "deprecated", "unstable", "frozen", "locked"])
def test_stability_levels(level: str) -> None:
    assert invoke("stability", level).value == level


@mark_pipeline
def test_stability_rejects_unknown_level() -> None:
    with pytest.raises(ContractViolation, match="alpha"):
        invoke("stability", "alpha")


@mark_pipeline
def test_stability_rejects_surrounding_whitespace() -> None:
    with pytest.raises(ContractViolation):
        invoke("stability", "  stable ")


@mark_pipeline
def test_tag_names_are_unique() -> None:
    assert {k.value for k in TagKind} >= {"name", "symbol-name", "throws", "ordered-list"}
    assert len({k.value for k in TagKind}) == len(list(TagKind))
