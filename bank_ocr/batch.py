"""Reading and splitting multi-entry batches.

A batch is plain text where every entry takes four lines: three glyph rows
followed by one blank separator line. Only the glyph rows are decoded.

Example:
    >>> content = "    _ \\n  | _|\\n  ||_ \\n"
    >>> parse_entries_content(content, 2)
    [(<Digit.ONE: 1>, <Digit.TWO: 2>)]
"""

import logging
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from .decoder import decode_entry
from .exceptions import MalformedBatchError
from .glyphs import GLYPH_HEIGHT
from .types import DecodedSequence

logger = logging.getLogger(__name__)

# Glyph rows plus one separator line
LINES_PER_ENTRY = GLYPH_HEIGHT + 1


def split_lines(content: str, strip_carriage_returns: bool = True) -> List[str]:
    """Split raw batch content into lines.

    Splits on "\\n" only, so a trailing newline yields a final empty line
    (three glyph rows plus a newline make one complete four-line entry).

    Args:
        content: Raw file content
        strip_carriage_returns: Drop a trailing "\\r" from each line (CRLF input)

    Returns:
        List of lines without line terminators
    """
    lines = content.split("\n")
    if strip_carriage_returns:
        lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    return lines


def split_entries(
    lines: Sequence[str], warn_on_non_blank_separator: bool = True
) -> List[Tuple[int, List[str]]]:
    """Group batch lines into per-entry glyph rows.

    The whole batch is validated before any group is returned.

    Args:
        lines: All lines of the batch
        warn_on_non_blank_separator: Log a warning when a separator line
            contains anything but whitespace

    Returns:
        List of (line_number, rows) pairs, where line_number is the 1-based
        line of the entry's first glyph row

    Raises:
        MalformedBatchError: If the line count is not a multiple of 4
    """
    if len(lines) % LINES_PER_ENTRY != 0:
        raise MalformedBatchError(len(lines), lines_per_entry=LINES_PER_ENTRY)

    entries = []
    for start in range(0, len(lines), LINES_PER_ENTRY):
        separator = lines[start + GLYPH_HEIGHT]
        if warn_on_non_blank_separator and separator.strip():
            logger.warning(
                f"Separator line {start + GLYPH_HEIGHT + 1} is not blank: {separator!r}"
            )
        entries.append((start + 1, list(lines[start : start + GLYPH_HEIGHT])))

    return entries


def parse_entries_rows(lines: Sequence[str], width: int) -> List[DecodedSequence]:
    """Decode every entry of a batch given as lines.

    Args:
        lines: All lines of the batch
        width: Number of digits per entry

    Returns:
        Decoded sequences in input order

    Raises:
        MalformedBatchError: If the line count is not a multiple of 4
    """
    return [decode_entry(rows, width) for _, rows in split_entries(lines)]


def parse_entries_content(content: str, width: int) -> List[DecodedSequence]:
    """Decode every entry of a batch given as raw text.

    Args:
        content: Raw batch content
        width: Number of digits per entry

    Returns:
        Decoded sequences in input order

    Raises:
        MalformedBatchError: If the line count is not a multiple of 4
    """
    return parse_entries_rows(split_lines(content), width)


def read_lines(
    path: Union[str, Path],
    encoding: str = "utf-8",
    strip_carriage_returns: bool = True,
) -> List[str]:
    """Read a batch file into lines.

    Args:
        path: Path to the batch file
        encoding: Text encoding of the file
        strip_carriage_returns: Drop a trailing "\\r" from each line

    Returns:
        List of lines without line terminators

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Batch file not found: {path}")

    # newline="" keeps "\r" so that stripping stays under our control
    with open(path, "r", encoding=encoding, newline="") as f:
        content = f.read()

    return split_lines(content, strip_carriage_returns=strip_carriage_returns)
