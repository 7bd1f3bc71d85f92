"""
Pytest Configuration and Shared Fixtures

This file contains pytest configuration and fixtures that are available
to all test modules.
"""

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir():
    """Fixture providing the directory holding sample batch files."""
    return DATA_DIR


@pytest.fixture
def rows_123456789():
    """Fixture providing the glyph rows of account number 123456789."""
    return [
        "    _  _     _  _  _  _  _ ",
        "  | _| _||_||_ |_   ||_||_|",
        "  ||_  _|  | _||_|  ||_| _|",
    ]


@pytest.fixture
def rows_490067715():
    """Fixture providing the glyph rows of account number 490067715."""
    return [
        "    _  _  _  _  _  _     _ ",
        "|_||_|| || ||_   |  |  ||_ ",
        "  | _||_||_||_|  |  |  | _|",
    ]


@pytest.fixture
def expected_multiple_output():
    """Fixture providing the expected text output of file1-multiple.txt."""
    return "\n".join(
        [
            "000000000",
            "111111111 ERR",
            "22222222? ILL",
            "333333333 ERR",
            "????????? ILL",
            "555555555 ERR",
            "666666666 ERR",
            "777777777 ERR",
            "888888888 ERR",
            "999999999 ERR",
            "123456789",
            "000000051",
            "49006771? ILL",
            "1234?678? ILL",
        ]
    )
