# tests/test_address.py
"""
Tests for wallet address syntax validation.
"""
import pytest

from app.services.address import Address, is_valid_address, MIN_ADDRESS_LENGTH, MAX_ADDRESS_LENGTH

VALID_ADDRESS = "4Nd1mBQtrMJVYVfKf2PJy9NZUZdTAsp7D4xWLs4gDB4T"


class TestIsValidAddress:
    """Test the base58 / length rule."""

    def test_real_addresses_are_valid(self):
        """Typical Solana addresses pass."""
        for address in [
            VALID_ADDRESS,
            "So11111111111111111111111111111111111111112",
            "11111111111111111111111111111111",  # system program, 32 chars
        ]:
            assert is_valid_address(address) is True, address

    def test_length_boundaries(self):
        """32 and 44 characters are the inclusive bounds."""
        assert is_valid_address("a" * MIN_ADDRESS_LENGTH) is True
        assert is_valid_address("a" * MAX_ADDRESS_LENGTH) is True
        assert is_valid_address("a" * (MIN_ADDRESS_LENGTH - 1)) is False
        assert is_valid_address("a" * (MAX_ADDRESS_LENGTH + 1)) is False

    @pytest.mark.parametrize("char", ["0", "O", "I", "l", "-", "_", ".", " "])
    def test_non_base58_characters_rejected(self, char):
        """Characters outside the base58 alphabet are rejected."""
        address = VALID_ADDRESS[:-1] + char
        assert is_valid_address(address) is False

    def test_empty_and_non_string(self):
        """Empty strings and non-strings are never valid."""
        assert is_valid_address("") is False
        assert is_valid_address(None) is False
        assert is_valid_address(12345) is False

    def test_whitespace_is_not_stripped(self):
        """Surrounding whitespace makes an address invalid."""
        assert is_valid_address(f" {VALID_ADDRESS}") is False
        assert is_valid_address(f"{VALID_ADDRESS}\n") is False

    def test_ellipsis_placeholder_rejected(self):
        """Abbreviated display forms like '4Nd1m...xyz' are not addresses."""
        assert is_valid_address("4Nd1m...xyz") is False


class TestAddressParse:
    """Test the Address value type."""

    def test_parse_valid(self):
        address = Address.parse(VALID_ADDRESS)
        assert isinstance(address, Address)
        assert address == VALID_ADDRESS
        assert str(address) == VALID_ADDRESS

    def test_parse_invalid_raises_value_error(self):
        with pytest.raises(ValueError, match="Invalid wallet address"):
            Address.parse("not-an-address")
