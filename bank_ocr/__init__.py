"""Bank OCR: account numbers drawn as ASCII glyphs.

This package decodes account numbers rendered with pipes and underscores
(three rows, three columns per digit) and classifies each decoded number as
valid, illegible or failing its checksum.

Core Components:
    - types: Data structures (Digit, UNKNOWN, Classification, EntryResult)
    - glyphs: Exact template matching of 3x3 digit cells
    - decoder: Splitting of an entry into digit cells
    - validator: Checksum calculation and classification
    - batch: Reading and splitting multi-entry batches
    - formatter: Text and JSON output
    - config_loader: Configuration loading with Pydantic validation
    - processor: Main processing pipeline

Example:
    >>> from bank_ocr import AccountProcessor
    >>> processor = AccountProcessor()
    >>> batch = processor.process_file("accounts.txt")
    >>> for entry in batch.entries:
    ...     print(entry.text, entry.classification.value)
"""

from .batch import (
    LINES_PER_ENTRY,
    parse_entries_content,
    parse_entries_rows,
    read_lines,
    split_entries,
    split_lines,
)
from .config_loader import (
    BankOCRModuleConfig,
    Config,
    EntryConfig,
    InputConfig,
    LoggingConfig,
    OutputConfig,
    get_default_config,
    load_config,
)
from .decoder import decode_entry, slice_cell
from .exceptions import BankOCRError, MalformedBatchError, WrongRowCountError
from .formatter import (
    format_entries,
    format_entry,
    format_results,
    format_summary,
    symbols_to_text,
)
from .glyphs import DIGIT_WIDTH, GLYPH_HEIGHT, recognize, render
from .processor import AccountProcessor, build_entry_result
from .types import (
    UNKNOWN,
    BatchResult,
    Classification,
    DecodedSequence,
    Digit,
    EntryResult,
    Symbol,
    Unknown,
)
from .validator import (
    calculate_checksum,
    classify,
    is_readable,
    parse_symbol,
    symbols_from_string,
    validate_checksum,
)

__all__ = [
    # Types
    "Digit",
    "Unknown",
    "UNKNOWN",
    "Symbol",
    "DecodedSequence",
    "Classification",
    "EntryResult",
    "BatchResult",
    # Errors
    "BankOCRError",
    "WrongRowCountError",
    "MalformedBatchError",
    # Recognition and decoding
    "DIGIT_WIDTH",
    "GLYPH_HEIGHT",
    "recognize",
    "render",
    "slice_cell",
    "decode_entry",
    # Validation
    "is_readable",
    "calculate_checksum",
    "validate_checksum",
    "classify",
    "parse_symbol",
    "symbols_from_string",
    # Batches
    "LINES_PER_ENTRY",
    "split_lines",
    "split_entries",
    "parse_entries_rows",
    "parse_entries_content",
    "read_lines",
    # Output
    "symbols_to_text",
    "format_entry",
    "format_entries",
    "format_results",
    "format_summary",
    # Configuration
    "Config",
    "BankOCRModuleConfig",
    "EntryConfig",
    "InputConfig",
    "OutputConfig",
    "LoggingConfig",
    "load_config",
    "get_default_config",
    # Processing
    "AccountProcessor",
    "build_entry_result",
]
