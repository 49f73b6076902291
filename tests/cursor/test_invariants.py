"""Property-based tests for cursor and grammar invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tagcursor import MalformedAttributeError, Parser
from tagcursor.cursor import Cursor, normalize_newlines
from tagcursor.result import Malformed, Match, NoMatch

# Alphabet biased towards characters that matter to the grammar
TAG_ALPHABET = st.sampled_from(list('<>="/ \n\t\r\'abcXYZ-1👋é'))
tag_like_text = st.text(alphabet=TAG_ALPHABET, max_size=60)


def _state(parser: Parser) -> tuple[int, int, int, str]:
    loc = parser.current_location()
    return (loc.offset, loc.lineno, loc.col_offset, parser.current_char())


class TestCursorInvariants:
    """Test basic invariants of the cursor."""

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_walk_to_end_matches_line_count(self, source: str) -> None:
        """Walking the whole source ends on the last line, after the last character."""
        cursor = Cursor(source)
        normalized = normalize_newlines(source)
        while cursor.current_char():
            cursor.advance()

        loc = cursor.current_location()
        assert loc.offset == len(normalized)
        assert loc.lineno == normalized.count("\n") + 1
        assert loc.col_offset == len(normalized) - (normalized.rfind("\n") + 1) + 1

    @given(st.text(max_size=200))
    @settings(max_examples=100)
    def test_position_never_exceeds_length(self, source: str) -> None:
        cursor = Cursor(source)
        for _ in range(len(source) + 5):
            cursor.advance()
            assert 0 <= cursor.current_position() <= cursor.length

    @given(st.text(max_size=200), st.data())
    @settings(max_examples=100)
    def test_extract_partition_consistency(self, source: str, data: st.DataObject) -> None:
        """Concatenating extracts over adjacent subranges equals the whole extract."""
        cursor = Cursor(source)
        cuts = sorted(
            data.draw(st.lists(st.integers(min_value=0, max_value=cursor.length), max_size=6))
        )
        bounds = [0, *cuts, cursor.length]
        pieces = [cursor.extract(a, b) for a, b in zip(bounds, bounds[1:])]
        assert "".join(pieces) == cursor.extract(0, cursor.length)

    @given(st.text(max_size=200), st.data())
    @settings(max_examples=100)
    def test_backtrack_is_exact(self, source: str, data: st.DataObject) -> None:
        """Backtracking to a snapshot reproduces the state at snapshot time."""
        cursor = Cursor(source)
        for _ in range(data.draw(st.integers(min_value=0, max_value=len(source)))):
            cursor.advance()
        saved = cursor.current_location()
        saved_char = cursor.current_char()
        for _ in range(data.draw(st.integers(min_value=0, max_value=len(source)))):
            cursor.advance()

        cursor.backtrack(saved)

        assert cursor.current_location() == saved
        assert cursor.current_char() == saved_char


class TestGrammarInvariants:
    """Test invariants of the grammar productions."""

    @given(tag_like_text)
    @settings(max_examples=300)
    def test_no_match_restores_cursor(self, source: str) -> None:
        """A production that reports NoMatch leaves the cursor untouched."""
        for production in (
            "parse_whitespace",
            "parse_attribute_name",
            "parse_attribute_value",
            "parse_tag_name",
            "parse_element",
        ):
            parser = Parser(source)
            before = _state(parser)
            result = getattr(parser, production)()
            if isinstance(result, NoMatch):
                assert _state(parser) == before, production
                assert result.location == parser.current_location()

    @given(tag_like_text)
    @settings(max_examples=300)
    def test_match_spans_consumed_text(self, source: str) -> None:
        """A Match ends exactly where the cursor stopped."""
        parser = Parser(source)
        result = parser.parse_element()
        if isinstance(result, Match):
            assert result.end == parser.current_location()
            assert result.start.offset == 0
            assert parser.extract(0, result.end.offset).startswith("<")

    @given(tag_like_text)
    @settings(max_examples=300)
    def test_only_malformed_attribute_errors_escape(self, source: str) -> None:
        """parse() returns an Element or None, or raises MalformedAttributeError."""
        parser = Parser(source)
        try:
            parser.parse()
        except MalformedAttributeError as err:
            assert err.lineno is not None
            assert "=" in source

    @given(tag_like_text)
    @settings(max_examples=200)
    def test_malformed_result_matches_raised_error(self, source: str) -> None:
        result = Parser(source).parse_element()
        if isinstance(result, Malformed):
            with pytest.raises(MalformedAttributeError):
                Parser(source).parse()

    @given(tag_like_text)
    @settings(max_examples=200)
    def test_names_are_lower_case(self, source: str) -> None:
        try:
            element = Parser(source).parse()
        except MalformedAttributeError:
            return
        if element is not None:
            assert element.tag_name == element.tag_name.lower()
            assert element.tag_name.isascii() and element.tag_name.isalpha()
            for attr in element.attributes:
                assert attr.name == attr.name.lower()


class TestLineEndings:
    """CRLF and CR inputs behave exactly like their LF equivalents."""

    @given(tag_like_text)
    @settings(max_examples=200)
    def test_crlf_equivalent_to_lf(self, source: str) -> None:
        lf = normalize_newlines(source)
        crlf = lf.replace("\n", "\r\n")
        lf_result = Parser(lf).parse_element()
        crlf_result = Parser(crlf).parse_element()

        assert type(lf_result) is type(crlf_result)
        if isinstance(lf_result, Match) and isinstance(crlf_result, Match):
            assert lf_result.value == crlf_result.value
            assert lf_result.end == crlf_result.end


class TestDeterminism:
    """Test that parsing is deterministic."""

    @given(tag_like_text)
    @settings(max_examples=100)
    def test_repeated_parse_identical(self, source: str) -> None:
        first = Parser(source).parse_element()
        second = Parser(source).parse_element()

        assert type(first) is type(second)
        if isinstance(first, Malformed) and isinstance(second, Malformed):
            assert str(first.error) == str(second.error)
        else:
            assert first == second
