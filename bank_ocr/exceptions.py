"""Errors raised by the account-number reader.

Unrecognised glyphs and failing checksums are classification outcomes, not
errors. Only malformed input shapes are raised.
"""


class BankOCRError(Exception):
    """Base class for input-shape errors raised by this package."""


class WrongRowCountError(BankOCRError, ValueError):
    """An entry block does not have exactly three glyph rows."""

    def __init__(self, row_count: int, expected: int = 3):
        self.row_count = row_count
        self.expected = expected
        super().__init__(f"Expected {expected} glyph rows per entry, got {row_count}")


class MalformedBatchError(BankOCRError, ValueError):
    """A batch's line count is not a multiple of the lines per entry."""

    def __init__(self, line_count: int, lines_per_entry: int = 4):
        self.line_count = line_count
        self.lines_per_entry = lines_per_entry
        super().__init__(
            f"Batch must contain a number of lines that is a multiple of "
            f"{lines_per_entry}, got {line_count}"
        )
