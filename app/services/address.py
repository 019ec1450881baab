# app/services/address.py
import re

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
MIN_ADDRESS_LENGTH = 32
MAX_ADDRESS_LENGTH = 44

_ADDRESS_RE = re.compile(
    rf"[{BASE58_ALPHABET}]{{{MIN_ADDRESS_LENGTH},{MAX_ADDRESS_LENGTH}}}"
)


def is_valid_address(raw: str) -> bool:
    """Check a string against Solana address syntax (base58, 32-44 chars)."""
    return isinstance(raw, str) and _ADDRESS_RE.fullmatch(raw) is not None


class Address(str):
    """
    A wallet address that has passed syntax validation.

    Build instances with Address.parse(); the value is never normalized,
    so surrounding whitespace makes an address invalid rather than being stripped.
    """

    __slots__ = ()

    @classmethod
    def parse(cls, raw: str) -> "Address":
        """
        Validate a raw string and wrap it.

        Raises:
            ValueError: If the string is not a syntactically valid address.
        """
        if not is_valid_address(raw):
            raise ValueError(f"Invalid wallet address: {raw!r}")
        return cls(raw)
