# topmark:header:start
#
#   project      : LitDoc
#   file         : test_classify.py
#   file_relpath : tests/convert/test_classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for line classification, assimilation and merging."""

from __future__ import annotations

import re

from litdoc.convert.classify import (
    Blank,
    Code,
    Doc,
    LineClassification,
    assimilate,
    classify,
    merge,
    render,
    split_lines,
)
from tests.conftest import mark_pipeline, parametrize

SLASH: re.Pattern[str] = re.compile(r"^\s*//\s?(.*)$")


@mark_pipeline
def test_classify_comment_line_strips_comment_syntax() -> None:
    assert classify(SLASH, "js", "  // hello world", 4) == Doc(4, ("hello world",))


@mark_pipeline
def test_classify_bare_comment_marker_yields_empty_doc_line() -> None:
    assert classify(SLASH, "js", "//", 1) == Doc(1, ("",))


@mark_pipeline
@parametrize("line", ["", " ", "\t", "   \t  "])
def test_classify_whitespace_only_is_blank_and_kept_verbatim(line: str) -> None:
    assert classify(SLASH, "js", line, 7) == Blank(7, line)


@mark_pipeline
def test_classify_other_lines_are_code() -> None:
    assert classify(SLASH, "js", "const x = 1; // trailing", 2) == Code(
        2, "js", ("const x = 1; // trailing",)
    )


@mark_pipeline
def test_classify_without_capture_group_yields_empty_doc_line() -> None:
    assert classify(re.compile(r"^;;"), "lisp", ";; note", 1) == Doc(1, ("",))


@mark_pipeline
def test_assimilate_docs_always_merge() -> None:
    merged = assimilate(Doc(1, ("a", "b")), Doc(3, ("c",)))
    assert merged == (Doc(1, ("a", "b", "c")),)


@mark_pipeline
def test_assimilate_code_same_language_merges() -> None:
    assert assimilate(Code(1, "js", ("a",)), Code(2, "js", ("b",))) == (
        Code(1, "js", ("a", "b")),
    )


@mark_pipeline
def test_assimilate_code_different_language_stays_apart() -> None:
    a = Code(1, "js", ("a",))
    b = Code(2, "python", ("b",))
    assert assimilate(a, b) == (a, b)


@mark_pipeline
def test_assimilate_code_absorbs_following_blank() -> None:
    assert assimilate(Code(1, "js", ("a",)), Blank(2, "  ")) == (Code(1, "js", ("a", "  ")),)


@mark_pipeline
@parametrize(
    "a, b",
    [
        (Blank(1, ""), Code(2, "js", ("x",))),
        (Blank(1, ""), Blank(2, "")),
        (Doc(1, ("d",)), Blank(2, "")),
        (Blank(1, ""), Doc(2, ("d",))),
        (Doc(1, ("d",)), Code(2, "js", ("x",))),
        (Code(1, "js", ("x",)), Doc(2, ("d",))),
    ],
)
def test_assimilate_incompatible_pairs_stay_apart(
    a: LineClassification, b: LineClassification
) -> None:
    assert assimilate(a, b) == (a, b)


@mark_pipeline
def test_merge_absorbs_blank_between_code_runs() -> None:
    result = merge([Code(1, "js", ("a",)), Blank(2, " "), Code(3, "js", ("b",))])
    assert result == [Code(1, "js", ("a", " ", "b"))]


@mark_pipeline
def test_merge_is_local_to_the_last_element() -> None:
    items: list[LineClassification] = [
        Doc(1, ("intro",)),
        Blank(2, ""),
        Doc(3, ("more",)),
        Code(4, "js", ("x",)),
        Doc(5, ("outro",)),
    ]
    assert merge(items) == items


@mark_pipeline
def test_merge_of_nothing_is_empty() -> None:
    assert merge([]) == []


@mark_pipeline
def test_render_doc_joins_lines() -> None:
    assert render(Doc(1, ("a", "b"))) == "a\nb"


@mark_pipeline
@parametrize("text", ["", "  ", "\t"])
def test_render_blank_appends_newline(text: str) -> None:
    assert render(classify(SLASH, "js", text, 1)) == text + "\n"


@mark_pipeline
def test_render_code_escapes_double_quotes() -> None:
    rendered = render(Code(1, "js", ('say("hi")', "done")))
    assert rendered == '@code(language: "js" "say(\\"hi\\")\ndone")\n'


@mark_pipeline
@parametrize(
    "text, expected",
    [
        ("", [""]),
        ("a", ["a"]),
        ("a\n", ["a"]),
        ("a\n\n", ["a", ""]),
        ("a\r\nb\rc\nd", ["a", "b", "c", "d"]),
    ],
)
def test_split_lines(text: str, expected: list[str]) -> None:
    assert split_lines(text) == expected
