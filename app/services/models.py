# app/services/models.py
from dataclasses import dataclass
from typing import Tuple

from app.services.address import Address


@dataclass(frozen=True)
class ProviderResponse:
    """Wallet data as returned by the upstream client, after wire validation."""
    balance: float
    transactions: Tuple[str, ...]


@dataclass(frozen=True)
class WalletSnapshot:
    """Point-in-time read of a wallet's balance and transaction history."""
    address: Address
    balance: float
    transactions: Tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "address": str(self.address),
            "balance": self.balance,
            "transactions": list(self.transactions),
        }
