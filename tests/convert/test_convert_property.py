# topmark:header:start
#
#   project      : LitDoc
#   file         : test_convert_property.py
#   file_relpath : tests/convert/test_convert_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for source conversion.

Generated sources mix documentation comments, code and blank lines and check:
1) a file made only of comments converts to its comment bodies joined by newlines;
2) merging never leaves two adjacent runs that could still be merged;
3) every source line is accounted for exactly once after merging.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from litdoc.convert import SLASH_CONVERTER, Blank, Code, Doc, assimilate, classify, merge
from litdoc.convert.classify import LineClassification

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

# Comment bodies never contain line breaks.
s_body = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="\r\n"),
    max_size=30,
)

s_code = st.from_regex(r"[a-z_][a-z0-9_ =+()]{0,20}", fullmatch=True)

s_line = st.one_of(
    s_body.map(lambda b: f"// {b}"),
    s_code,
    st.sampled_from(["", " ", "\t"]),
)


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=200)
@given(bodies=st.lists(s_body, min_size=1, max_size=20))
def test_comment_only_source_yields_comment_bodies(bodies: list[str]) -> None:
    source = "\n".join(f"// {b}" for b in bodies) + "\n"
    assert SLASH_CONVERTER.convert(source) == "\n".join(bodies)


def _mergeable(a: LineClassification, b: LineClassification) -> bool:
    return len(assimilate(a, b)) == 1


def _line_count(item: LineClassification) -> int:
    match item:
        case Doc(lines=lines) | Code(lines=lines):
            return len(lines)
        case Blank():
            return 1


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=200)
@given(lines=st.lists(s_line, max_size=40))
def test_merge_is_maximal_and_lossless(lines: list[str]) -> None:
    classified = [
        classify(SLASH_CONVERTER.pattern, "js", line, n) for n, line in enumerate(lines, start=1)
    ]
    merged = merge(classified)

    assert all(not _mergeable(a, b) for a, b in zip(merged, merged[1:]))
    assert sum(_line_count(m) for m in merged) == len(lines)
    assert [m.line_number for m in merged] == sorted(m.line_number for m in merged)
