"""Tests for the catalog parser."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from catalogtree.parser import parse_catalog, parse_catalog_with_diagnostics
from catalogtree.render import format_catalog
from catalogtree.schemas import CatalogNode, Diagnostic, DiagnosticKind
from catalogtree.tree import count_nodes


def _texts(node: CatalogNode) -> list[str]:
    return [token.text for token in node.tokens]


def _types(node: CatalogNode) -> list[str]:
    return [token.type for token in node.tokens]


class TestParseCatalog:
    """Tests for parse_catalog function."""

    def test_scenario_section_with_link_and_hidden(self) -> None:
        """One root with a linked child and a hidden child, in source order."""
        source = 'Section @t(kw)\n  item1 @u("http://a")\n  item2 @hidden("secret")\n'

        forest = parse_catalog(source)

        assert len(forest) == 1
        section = forest[0]
        assert _texts(section) == ["Section"]
        assert _types(section) == ["kw"]
        assert section.url is None
        item1, item2 = section.children
        assert _texts(item1) == ["item1"]
        assert item1.url == "http://a"
        assert item1.open_in_new_context is True
        assert item1.hidden_trigger is None
        assert _texts(item2) == ["item2"]
        assert item2.hidden_trigger == "secret"
        assert item2.url is None

    def test_types_and_bare_link_arguments(self) -> None:
        forest = parse_catalog('foo bar @t(kw,id) @u("http://x", false)')
        node = forest[0]

        assert [(t.text, t.type) for t in node.tokens] == [("foo", "kw"), ("bar", "id")]
        assert node.url == "http://x"
        assert node.open_in_new_context is False

    def test_array_link_sets_new_context_flag(self) -> None:
        forest = parse_catalog('foo bar @t(kw,id) @u(["http://x", false])')
        node = forest[0]

        assert [(t.text, t.type) for t in node.tokens] == [("foo", "kw"), ("bar", "id")]
        assert node.url == "http://x"
        assert node.open_in_new_context is False

    def test_type_count_mismatch_pads_and_reports(self) -> None:
        """Missing types default to id and a diagnostic is emitted."""
        diagnostics: list[Diagnostic] = []

        forest = parse_catalog("a b c @t(kw)", diagnostics=diagnostics)

        assert _types(forest[0]) == ["kw", "id", "id"]
        assert len(diagnostics) == 1
        assert diagnostics[0].kind is DiagnosticKind.TYPE_COUNT_MISMATCH
        assert diagnostics[0].line_number == 1

    def test_excess_types_are_truncated(self) -> None:
        diagnostics: list[Diagnostic] = []

        forest = parse_catalog("a @t(kw, str, num)", diagnostics=diagnostics)

        assert _types(forest[0]) == ["kw"]
        assert [d.kind for d in diagnostics] == [DiagnosticKind.TYPE_COUNT_MISMATCH]

    def test_matching_type_count_has_no_diagnostic(self) -> None:
        diagnostics: list[Diagnostic] = []

        parse_catalog("a b @t(kw, id)", diagnostics=diagnostics)

        assert diagnostics == []

    def test_mismatch_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="catalogtree"):
            parse_catalog("a b @t(kw)")

        assert "@t count (1) != tokens (2)" in caplog.text

    def test_blank_lines_are_skipped(self) -> None:
        """Blank and whitespace-only lines do not affect nesting."""
        forest = parse_catalog("root\n\n   \n  child\n\t\n  sibling\n")

        assert len(forest) == 1
        assert [_texts(child) for child in forest[0].children] == [["child"], ["sibling"]]

    def test_crlf_line_endings(self) -> None:
        forest = parse_catalog("root\r\n  child\r\n")

        assert _texts(forest[0]) == ["root"]
        assert _texts(forest[0].children[0]) == ["child"]

    def test_directive_only_line_produces_no_node(self) -> None:
        diagnostics: list[Diagnostic] = []

        forest = parse_catalog('root\n  @u("x")\n  child', diagnostics=diagnostics)

        assert count_nodes(forest) == 2
        assert [d.kind for d in diagnostics] == [DiagnosticKind.DIRECTIVE_ONLY_LINE]
        assert diagnostics[0].line_number == 2

    def test_dedent_folding(self) -> None:
        """The fourth line (depth 1) becomes a sibling of the second line."""
        source = "a\n  b\n    c\n  d\ne\n"

        forest = parse_catalog(source)

        assert [_texts(n) for n in forest] == [["a"], ["e"]]
        assert [_texts(n) for n in forest[0].children] == [["b"], ["d"]]
        assert [_texts(n) for n in forest[0].children[0].children] == [["c"]]

    def test_quoted_tokens_keep_raw_text(self) -> None:
        forest = parse_catalog(r'print "a\\b" end')
        node = forest[0]

        assert _texts(node) == ["print", r'"a\\b"', "end"]
        assert node.tokens[1].display == "a\\b"
        assert node.display_text == "print a\\b end"

    def test_escaped_directive_stays_in_content(self) -> None:
        forest = parse_catalog(r"mail user\@t(x)")

        assert _texts(forest[0]) == ["mail", "user@t(x)"]

    def test_unterminated_string_is_lenient(self) -> None:
        forest = parse_catalog('say "unterminated')

        assert _texts(forest[0]) == ["say", '"unterminated']

    @pytest.mark.parametrize("source", ["", "\n\n", "   \n\t", "@t(kw)", "\\", '"', "@u([", "  \t  x"])
    def test_never_raises(self, source: str) -> None:
        """Arbitrary input parses without raising."""
        forest = parse_catalog(source)

        assert isinstance(forest, list)

    def test_node_count_matches_non_blank_lines(self, sample_catalog: str) -> None:
        forest = parse_catalog(sample_catalog)
        non_blank = [line for line in sample_catalog.splitlines() if line.strip()]

        assert count_nodes(forest) == len(non_blank)

    def test_nodes_are_immutable(self) -> None:
        node = parse_catalog("x")[0]

        with pytest.raises(ValidationError, match="frozen"):
            node.url = "http://changed"  # type: ignore[misc]

    def test_deeply_nested_chain(self) -> None:
        """Nesting depth is not limited by the interpreter recursion limit."""
        depth = 2000
        source = "\n".join("  " * level + f"n{level}" for level in range(depth))

        forest = parse_catalog(source)

        assert len(forest) == 1
        assert count_nodes(forest) == depth
        node = forest[0]
        for level in range(depth - 1):
            assert node.tokens[0].text == f"n{level}"
            assert len(node.children) == 1
            node = node.children[0]
        assert node.tokens[0].text == f"n{depth - 1}"
        assert node.children == ()

    def test_calls_do_not_share_state(self) -> None:
        first = parse_catalog("a\n  b")
        second = parse_catalog("c")

        assert len(first) == 1
        assert [_texts(n) for n in second] == [["c"]]
        assert [_texts(n) for n in first[0].children] == [["b"]]


class TestParseCatalogWithDiagnostics:
    """Tests for parse_catalog_with_diagnostics function."""

    def test_collects_forest_and_diagnostics(self) -> None:
        result = parse_catalog_with_diagnostics("a b @t(kw)\n@hidden(\"x\")")

        assert len(result.forest) == 1
        assert [d.kind for d in result.diagnostics] == [
            DiagnosticKind.TYPE_COUNT_MISMATCH,
            DiagnosticKind.DIRECTIVE_ONLY_LINE,
        ]


class TestReserialization:
    """Parsing the re-serialized forest yields an equal forest."""

    def test_round_trip(self, sample_catalog: str) -> None:
        forest = parse_catalog(sample_catalog)

        assert parse_catalog(format_catalog(forest)) == forest

    def test_round_trip_with_escapes(self) -> None:
        source = 'a\\ b c\\@d e\\\\f\n  "lit \\" x" @t(str) @u(["p", false])\n'
        forest = parse_catalog(source)

        assert [t.text for t in forest[0].tokens] == ["a b", "c@d", "e\\f"]
        assert parse_catalog(format_catalog(forest)) == forest

    def test_round_trip_url_with_quote(self) -> None:
        """Link targets holding a quote survive re-serialization."""
        forest = parse_catalog('a @u(["x\\"y"])\nb @u(["p\\"q", false])\n')

        assert forest[0].url == 'x"y'
        assert forest[1].url == 'p"q'
        assert parse_catalog(format_catalog(forest)) == forest
