# app/core/config.py
from dataclasses import dataclass
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import AnyHttpUrl, Field # AnyHttpUrl stays in pydantic core
from functools import lru_cache
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


@dataclass(frozen=True)
class ProviderConfig:
    """
    Connection settings for the upstream wallet data provider.

    Passed explicitly to the upstream client at construction so the client
    never reads global settings on its own.
    """
    base_url: str
    api_key: Optional[str] = None
    timeout: float = 5.0
    max_retries: int = 2
    backoff: float = 0.5
    backoff_max: float = 4.0


class Settings(BaseSettings):
    PROJECT_NAME: str = "Wallet Snapshot Gateway"
    API_STR: str = "/api"
    LOG_LEVEL: str = "INFO"

    # Upstream wallet data provider (SolanaTracker-style REST API)
    WALLET_PROVIDER_URL: AnyHttpUrl = "https://data.solanatracker.io/" # validates that it's a URL
    WALLET_PROVIDER_API_KEY: Optional[str] = None
    WALLET_PROVIDER_TIMEOUT: float = Field(default=5.0, gt=0)
    WALLET_PROVIDER_MAX_RETRIES: int = Field(default=2, ge=0)
    WALLET_PROVIDER_BACKOFF: float = Field(default=0.5, ge=0)
    WALLET_PROVIDER_BACKOFF_MAX: float = Field(default=4.0, ge=0)

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields from .env

    def provider_config(self) -> ProviderConfig:
        """Build the provider configuration handed to the upstream client."""
        return ProviderConfig(
            base_url=str(self.WALLET_PROVIDER_URL),
            api_key=self.WALLET_PROVIDER_API_KEY or None,
            timeout=self.WALLET_PROVIDER_TIMEOUT,
            max_retries=self.WALLET_PROVIDER_MAX_RETRIES,
            backoff=self.WALLET_PROVIDER_BACKOFF,
            backoff_max=self.WALLET_PROVIDER_BACKOFF_MAX,
        )

@lru_cache() # Cache the settings object for performance
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
