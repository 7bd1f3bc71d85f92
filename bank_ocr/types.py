"""Type definitions for the account-number reader.

This module defines the core data structures used throughout the pipeline:
the ten known digit glyphs, the UNKNOWN sentinel, entry classifications and
the per-entry / per-batch results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple, Union


class Digit(Enum):
    """Known digit glyphs.

    Each member's value is its numeric value and each carries its rendered
    3x3 shape as ``template`` (three rows, three characters per row).
    """

    # fmt: off
    ZERO = (0, (
        " _ ",
        "| |",
        "|_|",
    ))
    ONE = (1, (
        "   ",
        "  |",
        "  |",
    ))
    TWO = (2, (
        " _ ",
        " _|",
        "|_ ",
    ))
    THREE = (3, (
        " _ ",
        " _|",
        " _|",
    ))
    FOUR = (4, (
        "   ",
        "|_|",
        "  |",
    ))
    FIVE = (5, (
        " _ ",
        "|_ ",
        " _|",
    ))
    SIX = (6, (
        " _ ",
        "|_ ",
        "|_|",
    ))
    SEVEN = (7, (
        " _ ",
        "  |",
        "  |",
    ))
    EIGHT = (8, (
        " _ ",
        "|_|",
        "|_|",
    ))
    NINE = (9, (
        " _ ",
        "|_|",
        " _|",
    ))
    # fmt: on

    def __new__(cls, value: int, template: Tuple[str, str, str]):
        member = object.__new__(cls)
        member._value_ = value
        member.template = template
        return member

    @property
    def char(self) -> str:
        """Digit rendered as a single character ("0".."9")."""
        return str(self.value)


class Unknown(Enum):
    """Sentinel for a cell that matched no known glyph."""

    UNKNOWN = "?"

    @property
    def char(self) -> str:
        return self.value


UNKNOWN = Unknown.UNKNOWN

# One decoded position of an entry
Symbol = Union[Digit, Unknown]

# Ordered symbols of one entry, most significant digit first
DecodedSequence = Tuple[Symbol, ...]

# Rows of one digit position, as sliced from an entry. Normally three rows of
# three characters; short or missing rows are kept so they decode to UNKNOWN
Cell = Tuple[str, ...]


class Classification(Enum):
    """Classification of a decoded entry."""

    OK = "OK"  # Fully readable, checksum valid
    ILL = "ILL"  # Contains at least one UNKNOWN
    ERR = "ERR"  # Fully readable, checksum invalid


@dataclass(frozen=True)
class EntryResult:
    """Decoded entry together with its classification.

    ``classification`` is computed from ``symbols`` when the result is
    created and cannot be passed in.

    Attributes:
        symbols: Decoded symbols, most significant digit first
        classification: Classification derived from ``symbols``
        line_number: 1-based line of the entry's first glyph row in its batch
    """

    symbols: DecodedSequence
    line_number: int = 1
    classification: Classification = field(init=False)

    def __post_init__(self):
        from .validator import classify

        object.__setattr__(self, "symbols", tuple(self.symbols))
        object.__setattr__(self, "classification", classify(self.symbols))

    @property
    def text(self) -> str:
        """Symbols concatenated, UNKNOWN rendered as '?'."""
        return "".join(symbol.char for symbol in self.symbols)

    def is_ok(self) -> bool:
        return self.classification == Classification.OK

    def is_illegible(self) -> bool:
        return self.classification == Classification.ILL

    def is_error(self) -> bool:
        return self.classification == Classification.ERR

    def to_dict(self) -> Dict[str, Any]:
        """Serializable view of the entry.

        Returns:
            Dictionary with account text, classification tag and line number
        """
        return {
            "account": self.text,
            "status": self.classification.value,
            "line": self.line_number,
        }


@dataclass
class BatchResult:
    """Results of one multi-entry batch, in input order.

    Attributes:
        entries: Per-entry results, same order as the input
        source: Label of the input (file path or a placeholder)
        processing_time_ms: Total processing time in milliseconds
    """

    entries: List[EntryResult] = field(default_factory=list)
    source: str = "<lines>"
    processing_time_ms: float = 0.0

    def __len__(self) -> int:
        return len(self.entries)

    def counts(self) -> Dict[Classification, int]:
        """Count entries per classification.

        Returns:
            Mapping with every Classification as a key (zero if absent)
        """
        totals = {classification: 0 for classification in Classification}
        for entry in self.entries:
            totals[entry.classification] += 1
        return totals
