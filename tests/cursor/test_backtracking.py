"""Tests for snapshot/backtrack and extract on the cursor."""

import pytest

from tagcursor.cursor import Cursor
from tagcursor.location import SourceLocation


class TestBacktrack:
    """Backtracking restores the exact cursor state."""

    def test_restores_position_line_and_column(self) -> None:
        cursor = Cursor("ab\ncd\nef")
        cursor.advance()
        saved = cursor.current_location()
        for _ in range(5):
            cursor.advance()
        assert cursor.current_location().lineno == 3

        cursor.backtrack(saved)

        assert cursor.current_location() == saved
        assert cursor.current_char() == "b"

    def test_snapshot_is_not_aliased(self) -> None:
        cursor = Cursor("abc")
        saved = cursor.current_location()
        cursor.advance()
        cursor.advance()
        assert saved.offset == 0
        assert saved.col_offset == 1

    def test_backtrack_from_end_of_input(self) -> None:
        cursor = Cursor("ab")
        saved = cursor.current_location()
        cursor.advance()
        cursor.advance()
        assert cursor.current_char() == ""

        cursor.backtrack(saved)

        assert cursor.current_char() == "a"
        assert not cursor.at_end()

    def test_backtrack_to_end_of_input(self) -> None:
        cursor = Cursor("ab")
        cursor.advance()
        cursor.advance()
        end = cursor.current_location()
        cursor.backtrack(SourceLocation(offset=0, lineno=1, col_offset=1))

        cursor.backtrack(end)

        assert cursor.current_char() == ""
        assert cursor.current_position() == 2

    def test_backtrack_forward_to_later_snapshot(self) -> None:
        cursor = Cursor("a\nb")
        start = cursor.current_location()
        cursor.advance()
        cursor.advance()
        later = cursor.current_location()
        cursor.backtrack(start)

        cursor.backtrack(later)

        assert cursor.current_char() == "b"
        assert cursor.current_location().lineno == 2

    @pytest.mark.parametrize("offset", [-1, 4])
    def test_out_of_range_rejected(self, offset: int) -> None:
        cursor = Cursor("abc")
        with pytest.raises(ValueError, match="Cannot backtrack"):
            cursor.backtrack(SourceLocation(offset=offset, lineno=1, col_offset=1))


class TestExtract:
    """extract() returns half-open character ranges."""

    def test_basic_range(self) -> None:
        cursor = Cursor("<div>")
        assert cursor.extract(1, 4) == "div"

    def test_empty_range(self) -> None:
        cursor = Cursor("abc")
        assert cursor.extract(2, 2) == ""
        assert cursor.extract(3, 3) == ""

    def test_whole_source(self) -> None:
        cursor = Cursor("a\r\nb")
        assert cursor.extract(0, cursor.length) == "a\nb"

    def test_extract_does_not_move_cursor(self) -> None:
        cursor = Cursor("abc")
        cursor.extract(0, 3)
        assert cursor.current_position() == 0

    @pytest.mark.parametrize(
        "start,end",
        [(-1, 2), (2, 1), (0, 4), (4, 4)],
    )
    def test_invalid_ranges(self, start: int, end: int) -> None:
        cursor = Cursor("abc")
        with pytest.raises(ValueError, match="Invalid extract range"):
            cursor.extract(start, end)
