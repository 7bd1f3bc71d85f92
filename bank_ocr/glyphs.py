"""Glyph recognition for seven-segment style ASCII digits.

Each digit is drawn with pipes and underscores in a 3x3 character cell:

     _     _  _     _  _  _  _  _
    | |  | _| _||_||_ |_   ||_||_|
    |_|  ||_  _|  | _||_|  ||_| _|

(digits 0 through 9)

Recognition is an exact, case- and whitespace-sensitive match of the three
rows against the known templates. Anything else decodes to UNKNOWN.

Example:
    >>> recognize((" _ ", " _|", "|_ "))
    <Digit.TWO: 2>
    >>> recognize((" _ ", " _|", "|  "))
    <Unknown.UNKNOWN: '?'>
"""

from typing import Dict, List, Sequence

from .types import UNKNOWN, Cell, Digit, Symbol

# Width of one digit cell in characters
DIGIT_WIDTH = 3

# Number of glyph rows per entry
GLYPH_HEIGHT = 3

_TEMPLATE_INDEX: Dict[Cell, Digit] = {digit.template: digit for digit in Digit}

# Templates must be pairwise distinct, otherwise a cell could match two digits
assert len(_TEMPLATE_INDEX) == len(Digit), "Digit templates overlap"


def recognize(cell: Sequence[str]) -> Symbol:
    """Match one 3x3 cell against the known digit templates.

    Args:
        cell: Three rows of (normally) three characters each

    Returns:
        The matching Digit, or UNKNOWN when no template matches exactly.
        Cells with the wrong number of rows or short rows never match.
    """
    return _TEMPLATE_INDEX.get(tuple(cell), UNKNOWN)


def render(digits: str) -> List[str]:
    """Render a string of digits into three glyph rows.

    Args:
        digits: Characters "0".."9" only

    Returns:
        Three strings, each ``DIGIT_WIDTH * len(digits)`` characters wide

    Raises:
        ValueError: If ``digits`` contains a non-digit character

    Example:
        >>> render("17")
        ['    _ ', '  |  |', '  |  |']
    """
    glyphs = []
    for char in digits:
        if char not in "0123456789":
            raise ValueError(f"Cannot render non-digit character: {char!r}")
        glyphs.append(Digit(int(char)).template)

    return ["".join(glyph[row] for glyph in glyphs) for row in range(GLYPH_HEIGHT)]
