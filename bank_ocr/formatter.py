"""Rendering of decoded entries for output.

Text output has one line per entry: the account number (UNKNOWN shown as
"?") followed by " ILL" or " ERR" unless the entry is OK.

    000000051
    49006771? ILL
    664371495 ERR
"""

import json
from typing import Iterable, Sequence

from .types import BatchResult, Classification, EntryResult, Symbol
from .validator import classify


def symbols_to_text(symbols: Sequence[Symbol]) -> str:
    """Concatenate symbols, rendering UNKNOWN as '?'."""
    return "".join(symbol.char for symbol in symbols)


def _with_tag(text: str, classification: Classification) -> str:
    if classification == Classification.OK:
        return text
    return f"{text} {classification.value}"


def format_entry(symbols: Sequence[Symbol]) -> str:
    """Format one decoded sequence as an output line.

    Args:
        symbols: Decoded sequence

    Returns:
        Account text, followed by the classification tag unless OK
    """
    return _with_tag(symbols_to_text(symbols), classify(symbols))


def format_entries(sequences: Iterable[Sequence[Symbol]]) -> str:
    """Format decoded sequences as newline-joined output lines."""
    return "\n".join(format_entry(symbols) for symbols in sequences)


def format_result(entry: EntryResult) -> str:
    return _with_tag(entry.text, entry.classification)


def format_summary(batch: BatchResult) -> str:
    """One-line count of entries per classification.

    Example:
        >>> format_summary(batch)
        '14 entries: 3 OK, 4 ILL, 7 ERR'
    """
    counts = batch.counts()
    parts = ", ".join(
        f"{counts[classification]} {classification.value}"
        for classification in Classification
    )
    return f"{len(batch)} entries: {parts}"


def format_results(batch: BatchResult, output_format: str = "text") -> str:
    """Render a whole batch.

    Args:
        batch: Processed batch
        output_format: "text" for the line format, "json" for a JSON document

    Returns:
        Rendered batch

    Raises:
        ValueError: If ``output_format`` is not supported
    """
    if output_format == "text":
        return "\n".join(format_result(entry) for entry in batch.entries)

    if output_format == "json":
        document = {
            "source": batch.source,
            "entries": [entry.to_dict() for entry in batch.entries],
            "summary": {
                classification.value: count
                for classification, count in batch.counts().items()
            },
        }
        return json.dumps(document, indent=2)

    raise ValueError(f"Unsupported output format: {output_format}")
