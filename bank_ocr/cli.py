"""Command line interface for the account reader."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from .config_loader import Config, EntryConfig, get_default_config, load_config
from .exceptions import BankOCRError
from .formatter import format_entry, format_results, format_summary
from .glyphs import render
from .processor import AccountProcessor
from .validator import symbols_from_string

logger = logging.getLogger(__name__)


def _parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bank-ocr",
        description="Read and validate account numbers drawn with pipes and underscores",
    )
    parser.add_argument("--config", type=Path, help="Configuration YAML file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    # Same options after the subcommand. SUPPRESS keeps the subcommand from
    # overwriting a value given before it.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config", type=Path, default=argparse.SUPPRESS, help="Configuration YAML file"
    )
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    parse_parser = sub.add_parser(
        "parse", parents=[common], help="Decode and classify a batch file"
    )
    parse_parser.add_argument("path", type=Path, help="Batch file to read")
    parse_parser.add_argument("--digits", type=int, help="Digits per entry")
    parse_parser.add_argument(
        "--format", dest="output_format", choices=["text", "json"], help="Output format"
    )
    parse_parser.add_argument(
        "--summary", action="store_true", help="Print classification counts"
    )

    check_parser = sub.add_parser(
        "check", parents=[common], help="Classify literal account numbers"
    )
    check_parser.add_argument("numbers", nargs="+", help="Account numbers, '?' for unknown")

    render_parser = sub.add_parser(
        "render", parents=[common], help="Print the glyph rows for digits"
    )
    render_parser.add_argument("digits", help="Digits to render")

    return parser.parse_args(argv)


def _load(config_path: Optional[Path]) -> Config:
    if config_path is None:
        return get_default_config()
    return load_config(config_path)


def _run_parse(args: argparse.Namespace, config: Config) -> int:
    module_config = config.bank_ocr
    if args.digits is not None:
        module_config.entry = EntryConfig(digits_per_entry=args.digits)
    if args.output_format is not None:
        module_config.output.format = args.output_format

    processor = AccountProcessor(config=config)
    batch = processor.process_file(args.path)

    print(format_results(batch, module_config.output.format))
    if args.summary or module_config.output.include_summary:
        print(format_summary(batch), file=sys.stderr)
    return 0


def _run_check(args: argparse.Namespace) -> int:
    for number in args.numbers:
        print(format_entry(symbols_from_string(number)))
    return 0


def _run_render(args: argparse.Namespace) -> int:
    print("\n".join(render(args.digits)))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Args:
        argv: Command line arguments without the program name

    Returns:
        Process exit status
    """
    args = _parse_args(sys.argv[1:] if argv is None else argv)

    try:
        config = _load(args.config)
    except (FileNotFoundError, yaml.YAMLError, ValidationError) as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error(f"Invalid configuration: {e}")
        return 1

    logging_config = config.bank_ocr.logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging_config.level,
        format=logging_config.format,
    )

    try:
        if args.command == "parse":
            return _run_parse(args, config)
        if args.command == "check":
            return _run_check(args)
        if args.command == "render":
            return _run_render(args)
    except (BankOCRError, FileNotFoundError, ValidationError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
