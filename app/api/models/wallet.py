# app/api/models/wallet.py
from typing import List
from pydantic import BaseModel, Field

from app.services.models import WalletSnapshot


class WalletResponse(BaseModel):
    """
    Response model for the wallet snapshot endpoint.
    """
    address: str = Field(..., description="The wallet address that was looked up.")
    balance: float = Field(..., description="Wallet balance as reported by the provider.")
    transactions: List[str] = Field(..., description="Transaction identifiers in provider order.")

    model_config = {
        "json_schema_extra": {
            "example": {
                "address": "4Nd1mBQtrMJVYVfKf2PJy9NZUZdTAsp7D4xWLs4gDB4T",
                "balance": 12.5,
                "transactions": ["txA", "txB"]
            }
        }
    }

    @classmethod
    def from_snapshot(cls, snapshot: WalletSnapshot) -> "WalletResponse":
        return cls(**snapshot.to_dict())


class HealthResponse(BaseModel):
    """
    Response model for the liveness endpoint.
    """
    status: str
    version: str
    timestamp: str
    uptime: float
