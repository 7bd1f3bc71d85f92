"""Account number checksum validation and classification.

An account number d9 d8 ... d1 (d1 being the rightmost digit) is valid when

    (1*d1 + 2*d2 + 3*d3 + ... + 9*d9) mod 11 == 0

The weights count from the rightmost digit, so the same rule applies to
sequences of any length.

Example:
    >>> classify(symbols_from_string("345882865"))
    <Classification.OK: 'OK'>
    >>> classify(symbols_from_string("86110??36"))
    <Classification.ILL: 'ILL'>
"""

from typing import Sequence

from .types import UNKNOWN, Classification, DecodedSequence, Digit, Symbol

CHECKSUM_MODULUS = 11


def is_readable(symbols: Sequence[Symbol]) -> bool:
    """Check that every position decoded to a known digit.

    Args:
        symbols: Decoded sequence

    Returns:
        True if no symbol is UNKNOWN
    """
    return UNKNOWN not in symbols


def calculate_checksum(symbols: Sequence[Symbol]) -> int:
    """Calculate the weighted positional checksum.

    The sequence is read from the rightmost digit, which gets weight 1, up to
    the leftmost digit, which gets weight ``len(symbols)``.

    Args:
        symbols: Fully readable decoded sequence

    Returns:
        Weighted sum (not reduced modulo 11)

    Raises:
        ValueError: If the sequence contains UNKNOWN

    Example:
        >>> calculate_checksum(symbols_from_string("345882865"))
        231
    """
    if not is_readable(symbols):
        raise ValueError("Cannot calculate checksum for a sequence that is not readable")

    return sum(
        digit.value * weight
        for weight, digit in enumerate(reversed(symbols), start=1)
    )


def validate_checksum(symbols: Sequence[Symbol]) -> bool:
    """Check the checksum rule for a fully readable sequence.

    Args:
        symbols: Fully readable decoded sequence

    Returns:
        True if the checksum is divisible by 11

    Raises:
        ValueError: If the sequence contains UNKNOWN
    """
    return calculate_checksum(symbols) % CHECKSUM_MODULUS == 0


def classify(symbols: Sequence[Symbol]) -> Classification:
    """Classify a decoded sequence.

    Readability is checked first: a sequence with any UNKNOWN is ILL and its
    checksum is never computed.

    Args:
        symbols: Decoded sequence

    Returns:
        ILL if unreadable, OK if the checksum is valid, ERR otherwise
    """
    if not is_readable(symbols):
        return Classification.ILL

    if not validate_checksum(symbols):
        return Classification.ERR

    return Classification.OK


def parse_symbol(char: str) -> Symbol:
    """Map a single character to a decoded symbol.

    Args:
        char: Exactly one character

    Returns:
        The Digit for "0".."9", UNKNOWN for any other character

    Raises:
        ValueError: If ``char`` is not exactly one character long

    Example:
        >>> parse_symbol("7")
        <Digit.SEVEN: 7>
        >>> parse_symbol("?")
        <Unknown.UNKNOWN: '?'>
    """
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")

    if char in "0123456789":
        return Digit(int(char))

    return UNKNOWN


def symbols_from_string(text: str) -> DecodedSequence:
    """Convert a plain string into a decoded sequence, one symbol per character.

    Useful for classifying account numbers that were not read from glyphs.

    Args:
        text: Account number as text, e.g. "457508000" or "86110??36"

    Returns:
        Tuple of symbols in the same order as the characters
    """
    return tuple(parse_symbol(char) for char in text)
