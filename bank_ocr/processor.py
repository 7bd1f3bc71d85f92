"""Main account processor.

This module orchestrates reading, decoding and classification of account
entries:
    1. BATCH SPLITTING: validate line count, group glyph rows per entry
    2. DECODING: slice each entry into cells and recognise every glyph
    3. CLASSIFICATION: readability gate, then checksum

Example:
    >>> from bank_ocr import AccountProcessor
    >>> processor = AccountProcessor()
    >>> batch = processor.process_file(Path("accounts.txt"))
    >>> for entry in batch.entries:
    ...     print(entry.text, entry.classification.value)
"""

import logging
import time
from pathlib import Path
from typing import Optional, Sequence, Union

from .batch import read_lines, split_entries, split_lines
from .config_loader import Config, get_default_config, load_config
from .decoder import decode_entry
from .types import BatchResult, Classification, EntryResult, Symbol

logger = logging.getLogger(__name__)


def build_entry_result(symbols: Sequence[Symbol], line_number: int = 1) -> EntryResult:
    """Wrap a decoded sequence in an EntryResult.

    Args:
        symbols: Decoded sequence
        line_number: 1-based line of the entry's first glyph row

    Returns:
        EntryResult whose classification is derived from ``symbols``
    """
    return EntryResult(symbols=tuple(symbols), line_number=line_number)


class AccountProcessor:
    """Decode and classify account entries.

    Args:
        config_path: Optional path to config YAML file. If None, uses default config.
        config: Optional already-built configuration; takes precedence over
            ``config_path``.

    Attributes:
        config: Full configuration object
        digits_per_entry: Number of digit cells read from each entry
    """

    def __init__(
        self, config_path: Optional[Path] = None, config: Optional[Config] = None
    ):
        if config is not None:
            self.config: Config = config
        elif config_path is None:
            self.config: Config = get_default_config()
        else:
            self.config: Config = load_config(config_path)

        self.digits_per_entry = self.config.bank_ocr.entry.digits_per_entry
        logger.info(
            f"Initialized account processor: digits_per_entry={self.digits_per_entry}, "
            f"output={self.config.bank_ocr.output.format}"
        )

    def process_entry(self, rows: Sequence[str], line_number: int = 1) -> EntryResult:
        """Decode and classify a single entry.

        Args:
            rows: Exactly three glyph rows
            line_number: 1-based line of the first row, used in results and logs

        Returns:
            EntryResult with decoded symbols and classification

        Raises:
            WrongRowCountError: If ``rows`` does not hold exactly three rows
        """
        symbols = decode_entry(rows, self.digits_per_entry)
        result = build_entry_result(symbols, line_number=line_number)

        logger.debug(
            f"Entry at line {line_number}: {result.text} -> {result.classification.value}"
        )
        return result

    def process_lines(self, lines: Sequence[str], source: str = "<lines>") -> BatchResult:
        """Decode and classify every entry of a batch.

        The batch is validated as a whole first, so a malformed batch yields
        no results at all.

        Args:
            lines: All lines of the batch (three glyph rows + separator per entry)
            source: Label for the input, kept on the result

        Returns:
            BatchResult with one entry per 4-line group, in input order

        Raises:
            MalformedBatchError: If the line count is not a multiple of 4
        """
        start_time = time.perf_counter()

        groups = split_entries(
            lines,
            warn_on_non_blank_separator=self.config.bank_ocr.input.warn_on_non_blank_separator,
        )
        entries = [
            self.process_entry(rows, line_number=line_number)
            for line_number, rows in groups
        ]

        batch = BatchResult(
            entries=entries,
            source=source,
            processing_time_ms=(time.perf_counter() - start_time) * 1000,
        )

        counts = batch.counts()
        logger.info(
            f"Processed {len(batch)} entries from {source} "
            f"(OK={counts[Classification.OK]}, ILL={counts[Classification.ILL]}, "
            f"ERR={counts[Classification.ERR]}) in {batch.processing_time_ms:.1f}ms"
        )
        return batch

    def process_text(self, content: str, source: str = "<text>") -> BatchResult:
        """Decode and classify every entry of raw batch text.

        Args:
            content: Raw batch content
            source: Label for the input

        Returns:
            BatchResult in input order

        Raises:
            MalformedBatchError: If the line count is not a multiple of 4
        """
        lines = split_lines(
            content,
            strip_carriage_returns=self.config.bank_ocr.input.strip_carriage_returns,
        )
        return self.process_lines(lines, source=source)

    def process_file(self, path: Union[str, Path]) -> BatchResult:
        """Decode and classify every entry of a batch file.

        Args:
            path: Path to the batch file

        Returns:
            BatchResult in input order

        Raises:
            FileNotFoundError: If the file does not exist
            MalformedBatchError: If the line count is not a multiple of 4
        """
        input_config = self.config.bank_ocr.input
        lines = read_lines(
            path,
            encoding=input_config.encoding,
            strip_carriage_returns=input_config.strip_carriage_returns,
        )
        return self.process_lines(lines, source=str(path))

    def get_processing_stats(self) -> dict:
        """Get processor settings.

        Returns:
            Dictionary with the active configuration values
        """
        return {
            "digits_per_entry": self.digits_per_entry,
            "encoding": self.config.bank_ocr.input.encoding,
            "strip_carriage_returns": self.config.bank_ocr.input.strip_carriage_returns,
            "output_format": self.config.bank_ocr.output.format,
        }
