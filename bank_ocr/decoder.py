"""Entry decoding: split a 3-row entry into digit cells and recognise each."""

from typing import Sequence

from .exceptions import WrongRowCountError
from .glyphs import DIGIT_WIDTH, GLYPH_HEIGHT, recognize
from .types import Cell, DecodedSequence


def slice_cell(rows: Sequence[str], index: int) -> Cell:
    """Extract the cell for one digit position from the entry rows.

    Rows shorter than the requested range yield a shorter (possibly empty)
    fragment, which then matches no template.

    Args:
        rows: Glyph rows of the entry
        index: 0-based digit position

    Returns:
        Tuple with one fragment per row
    """
    start = index * DIGIT_WIDTH
    return tuple(row[start : start + DIGIT_WIDTH] for row in rows)


def decode_entry(rows: Sequence[str], width: int) -> DecodedSequence:
    """Decode one entry into a sequence of symbols.

    Args:
        rows: Exactly three glyph rows
        width: Number of digit cells to read, left to right

    Returns:
        Tuple of exactly ``width`` symbols, most significant digit first

    Raises:
        WrongRowCountError: If ``rows`` does not hold exactly three rows
        ValueError: If ``width`` is negative

    Example:
        >>> decode_entry(["    _ ", "  | _|", "  ||_ "], 2)
        (<Digit.ONE: 1>, <Digit.TWO: 2>)
    """
    rows = list(rows)
    if len(rows) != GLYPH_HEIGHT:
        raise WrongRowCountError(len(rows), expected=GLYPH_HEIGHT)

    if width < 0:
        raise ValueError(f"Entry width must be non-negative, got {width}")

    return tuple(recognize(slice_cell(rows, index)) for index in range(width))
