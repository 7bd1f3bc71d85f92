"""Configuration loader with Pydantic validation for the account reader.

This module provides type-safe configuration loading from YAML files using
Pydantic models for validation and default values.
"""

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator


class EntryConfig(BaseModel):
    """Entry layout configuration.

    Attributes:
        digits_per_entry: Number of digit cells read from each entry
    """

    digits_per_entry: int = Field(default=9, ge=0)


class InputConfig(BaseModel):
    """Batch input configuration.

    Attributes:
        encoding: Text encoding of batch files
        strip_carriage_returns: Read CRLF files as if they were LF
        warn_on_non_blank_separator: Log a warning for separator lines with content
    """

    encoding: str = "utf-8"
    strip_carriage_returns: bool = True
    warn_on_non_blank_separator: bool = True


class OutputConfig(BaseModel):
    """Output configuration.

    Attributes:
        format: Output format ("text" or "json")
        include_summary: Append a per-classification count after the results
    """

    format: Literal["text", "json"] = "text"
    include_summary: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration applied by the command line entry point.

    Attributes:
        level: Standard logging level name
        format: Log record format string
    """

    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {v}")
        return level


class BankOCRModuleConfig(BaseModel):
    """Complete account reader configuration.

    Attributes:
        entry: Entry layout configuration
        input: Batch input configuration
        output: Output formatting configuration
        logging: Logging configuration
    """

    entry: EntryConfig = Field(default_factory=EntryConfig)
    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class Config(BaseModel):
    """Root configuration container.

    Attributes:
        bank_ocr: Account reader configuration
    """

    bank_ocr: BankOCRModuleConfig = Field(default_factory=BankOCRModuleConfig)


def load_config(config_path: Path) -> Config:
    """Load and validate configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated Config object with all settings

    Raises:
        FileNotFoundError: If config file does not exist
        yaml.YAMLError: If YAML parsing fails
        pydantic.ValidationError: If configuration validation fails

    Example:
        >>> config = load_config(Path("bank_ocr/config.yaml"))
        >>> print(config.bank_ocr.entry.digits_per_entry)
        9
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_dict = yaml.safe_load(f) or {}

    # Flat YAML structure holds the module settings
    return Config(bank_ocr=BankOCRModuleConfig(**config_dict))


def get_default_config() -> Config:
    """Get default configuration from bundled config.yaml file.

    Returns:
        Config object loaded from bank_ocr/config.yaml

    Example:
        >>> config = get_default_config()
        >>> print(config.bank_ocr.output.format)
        text
    """
    default_config_path = Path(__file__).parent / "config.yaml"
    if default_config_path.exists():
        return load_config(default_config_path)
    else:
        # Fallback to hardcoded defaults if config file is missing
        return Config()
