"""Unit tests for entry decoding."""

import pytest

from bank_ocr.decoder import decode_entry, slice_cell
from bank_ocr.exceptions import BankOCRError, WrongRowCountError
from bank_ocr.types import UNKNOWN, Digit


class TestSliceCell:
    """Test column slicing of entry rows."""

    def test_first_and_last_cell(self, rows_123456789):
        """Test slicing at the start and end of the rows."""
        assert slice_cell(rows_123456789, 0) == ("   ", "  |", "  |")
        assert slice_cell(rows_123456789, 8) == (" _ ", "|_|", " _|")

    def test_past_the_end_is_empty(self, rows_123456789):
        """Test slicing beyond the rows gives empty fragments."""
        assert slice_cell(rows_123456789, 9) == ("", "", "")

    def test_partial_cell(self):
        """Test rows ending mid-cell give short fragments."""
        assert slice_cell([" _  _", "| || ", "|_||_"], 1) == (" _", "| ", "|_")


class TestDecodeEntry:
    """Test decoding a full entry."""

    def test_decode_123456789(self, rows_123456789):
        """Test the reference entry decodes in order."""
        result = decode_entry(rows_123456789, 9)
        assert result == tuple(Digit(value) for value in range(1, 10))

    def test_decode_490067715(self, rows_490067715):
        """Test an entry with repeated digits."""
        result = decode_entry(rows_490067715, 9)
        assert "".join(symbol.char for symbol in result) == "490067715"

    @pytest.mark.parametrize("width", [0, 1, 5, 9, 12])
    def test_length_preservation(self, rows_123456789, width):
        """Test the result always has exactly ``width`` symbols."""
        assert len(decode_entry(rows_123456789, width)) == width

    def test_width_beyond_rows_gives_unknown(self, rows_123456789):
        """Test cells past the end of the rows decode to UNKNOWN."""
        result = decode_entry(rows_123456789, 11)
        assert result[:9] == tuple(Digit(value) for value in range(1, 10))
        assert result[9:] == (UNKNOWN, UNKNOWN)

    def test_short_rows_degrade_to_unknown(self, rows_123456789):
        """Test trailing spaces stripped from a row make the last cell unknown."""
        rows = [row.rstrip() for row in rows_123456789]
        result = decode_entry(rows, 9)
        # Last cell's top row " _ " loses its trailing space
        assert result[8] is UNKNOWN
        assert result[:8] == tuple(Digit(value) for value in range(1, 9))

    def test_empty_rows(self):
        """Test three empty rows decode to all UNKNOWN."""
        assert decode_entry(["", "", ""], 3) == (UNKNOWN, UNKNOWN, UNKNOWN)

    def test_accepts_tuple_rows(self, rows_123456789):
        """Test rows may be given as any sequence."""
        assert decode_entry(tuple(rows_123456789), 2) == (Digit.ONE, Digit.TWO)

    @pytest.mark.parametrize("row_count", [0, 1, 2, 4])
    def test_wrong_row_count(self, row_count):
        """Test anything but three rows raises WrongRowCountError."""
        rows = [" _ "] * row_count
        with pytest.raises(WrongRowCountError, match="Expected 3 glyph rows") as exc_info:
            decode_entry(rows, 1)
        assert exc_info.value.row_count == row_count

    def test_wrong_row_count_is_value_error(self):
        """Test WrongRowCountError belongs to both error hierarchies."""
        with pytest.raises(ValueError):
            decode_entry(["   ", "  |"], 1)
        with pytest.raises(BankOCRError):
            decode_entry(["   ", "  |"], 1)

    def test_negative_width(self, rows_123456789):
        """Test a negative width is rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            decode_entry(rows_123456789, -1)
