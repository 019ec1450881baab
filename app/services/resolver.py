# app/services/resolver.py
import logging

from app.core.errors import (
    InvalidAddress,
    MalformedUpstreamResponse,
    RateLimited,
    Unavailable,
    UpstreamMalformed,
    UpstreamNotFound,
    UpstreamRateLimited,
    UpstreamUnavailable,
    WalletNotFound,
)
from app.services.address import Address
from app.services.models import WalletSnapshot
from app.services.upstream import UpstreamClient

logger = logging.getLogger(__name__)


class WalletResolver:
    """
    Turns a raw address string into a WalletSnapshot.

    Validation happens before any upstream call. Retry policy belongs to the
    upstream client; the resolver calls it exactly once per lookup.
    """

    def __init__(self, client: UpstreamClient):
        self._client = client

    def close(self) -> None:
        close = getattr(self._client, "close", None)
        if callable(close):
            close()

    def resolve(self, raw_address: str) -> WalletSnapshot:
        """
        Resolve a wallet snapshot for a raw address string.

        Returns:
            WalletSnapshot with balance and transactions copied verbatim from the provider.

        Raises:
            InvalidAddress: The address fails syntax validation (no upstream call made).
            WalletNotFound: The provider does not know the address.
            RateLimited: The provider is throttling requests.
            Unavailable: The provider could not be reached.
            MalformedUpstreamResponse: The provider answered with data we cannot trust.
        """
        try:
            address = Address.parse(raw_address)
        except ValueError as e:
            raise InvalidAddress(str(e)) from e

        try:
            provider_response = self._client.fetch(address)
        except UpstreamNotFound as e:
            raise WalletNotFound(f"Wallet {address} not found") from e
        except UpstreamRateLimited as e:
            raise RateLimited(
                "Wallet provider rate limit reached, retry later",
                retry_after=e.retry_after,
            ) from e
        except UpstreamUnavailable as e:
            raise Unavailable("Wallet provider is currently unavailable") from e
        except UpstreamMalformed as e:
            logger.error(f"Wallet provider contract violation for {address}: {e}")
            raise MalformedUpstreamResponse("Invalid response from wallet provider") from e

        snapshot = WalletSnapshot(
            address=address,
            balance=provider_response.balance,
            transactions=tuple(provider_response.transactions),
        )
        logger.info(f"Resolved wallet {address}: {len(snapshot.transactions)} transactions")
        return snapshot
