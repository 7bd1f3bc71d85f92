"""Unit tests for checksum validation and classification."""

import pytest

from bank_ocr.types import UNKNOWN, Classification, Digit
from bank_ocr.validator import (
    calculate_checksum,
    classify,
    is_readable,
    parse_symbol,
    symbols_from_string,
    validate_checksum,
)


class TestParseSymbol:
    """Test single-character conversion."""

    @pytest.mark.parametrize("value", range(10))
    def test_digits(self, value):
        """Test decimal digits map to their Digit."""
        assert parse_symbol(str(value)) is Digit(value)

    @pytest.mark.parametrize("char", ["?", "a", "X", " ", "-", "_", "|"])
    def test_other_characters_are_unknown(self, char):
        """Test any other single character maps to UNKNOWN."""
        assert parse_symbol(char) is UNKNOWN

    def test_non_ascii_digits_are_unknown(self):
        """Test only ASCII digits are accepted as digits."""
        assert parse_symbol("²") is UNKNOWN
        assert parse_symbol("٣") is UNKNOWN

    @pytest.mark.parametrize("token", ["", "12", "??"])
    def test_wrong_arity(self, token):
        """Test empty and multi-character tokens are rejected."""
        with pytest.raises(ValueError, match="single character"):
            parse_symbol(token)


class TestSymbolsFromString:
    """Test string to sequence conversion."""

    def test_preserves_order(self):
        """Test characters map one-to-one, in order."""
        assert symbols_from_string("86110??36") == (
            Digit.EIGHT,
            Digit.SIX,
            Digit.ONE,
            Digit.ONE,
            Digit.ZERO,
            UNKNOWN,
            UNKNOWN,
            Digit.THREE,
            Digit.SIX,
        )

    def test_empty_string(self):
        """Test an empty string gives an empty sequence."""
        assert symbols_from_string("") == ()


class TestIsReadable:
    """Test the readability gate."""

    def test_all_digits(self):
        assert is_readable(symbols_from_string("457508000")) is True

    def test_with_unknown(self):
        assert is_readable(symbols_from_string("4575?8000")) is False

    def test_empty_sequence(self):
        assert is_readable(()) is True


class TestCalculateChecksum:
    """Test the weighted positional checksum."""

    def test_reference_account(self):
        """Test 345882865: 1*5 + 2*6 + 3*8 + ... + 9*3 = 231."""
        assert calculate_checksum(symbols_from_string("345882865")) == 231

    def test_rightmost_digit_has_weight_one(self):
        """Test weights count from the right."""
        assert calculate_checksum(symbols_from_string("000000001")) == 1
        assert calculate_checksum(symbols_from_string("100000000")) == 9

    def test_weights_depend_on_length(self):
        """Test shorter sequences weigh their leftmost digit by their length."""
        assert calculate_checksum(symbols_from_string("1000")) == 4
        assert calculate_checksum(symbols_from_string("21")) == 5

    def test_empty_sequence(self):
        assert calculate_checksum(()) == 0

    def test_unreadable_sequence(self):
        """Test the checksum refuses sequences containing UNKNOWN."""
        with pytest.raises(ValueError, match="not readable"):
            calculate_checksum(symbols_from_string("86110??36"))


class TestValidateChecksum:
    """Test the modulo 11 rule."""

    def test_valid(self):
        assert validate_checksum(symbols_from_string("345882865")) is True
        assert validate_checksum(symbols_from_string("000000051")) is True

    def test_invalid(self):
        assert validate_checksum(symbols_from_string("664371495")) is False

    def test_unreadable_sequence(self):
        with pytest.raises(ValueError):
            validate_checksum((UNKNOWN,))


class TestClassify:
    """Test classification of decoded sequences."""

    @pytest.mark.parametrize(
        "account, expected",
        [
            ("457508000", Classification.OK),
            ("664371495", Classification.ERR),
            ("111111111", Classification.ERR),
            ("86110??36", Classification.ILL),
            ("345882865", Classification.OK),
            ("123456789", Classification.OK),
            ("000000000", Classification.OK),
            ("490067715", Classification.ERR),
            ("?????????", Classification.ILL),
        ],
    )
    def test_known_accounts(self, account, expected):
        """Test classification of literal account numbers."""
        assert classify(symbols_from_string(account)) is expected

    def test_readability_dominates_checksum(self):
        """Test an otherwise valid number with an UNKNOWN is ILL."""
        # Known digits alone sum to 0, which would be OK
        symbols = symbols_from_string("0000?0000")
        assert classify(symbols) is Classification.ILL

    def test_checksum_never_computed_for_unreadable(self, monkeypatch):
        """Test the checksum is not evaluated when the sequence has UNKNOWN."""
        import bank_ocr.validator as validator

        def fail(_symbols):
            raise AssertionError("checksum computed for unreadable sequence")

        monkeypatch.setattr(validator, "calculate_checksum", fail)
        assert validator.classify(symbols_from_string("12345678?")) is Classification.ILL

    def test_idempotent(self):
        """Test repeated classification gives the same result."""
        for account in ["457508000", "664371495", "86110??36"]:
            symbols = symbols_from_string(account)
            assert classify(symbols) is classify(symbols)

    def test_accepts_lists(self):
        """Test any sequence type is accepted."""
        assert classify(list(symbols_from_string("457508000"))) is Classification.OK

    def test_empty_sequence_is_ok(self):
        """Test an empty sequence is readable with checksum 0."""
        assert classify(()) is Classification.OK
