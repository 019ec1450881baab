# app/api/endpoints/wallet.py
import math
from functools import lru_cache
from fastapi import APIRouter, Depends, HTTPException, Path, status
import logging

from app.core.config import settings
from app.core.errors import ResolveError, RateLimited
from app.services.resolver import WalletResolver
from app.services.upstream import HttpUpstreamClient
from app.api.models.wallet import WalletResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@lru_cache()
def get_resolver() -> WalletResolver:
    """Build the application-wide resolver from settings (overridable in tests)."""
    client = HttpUpstreamClient(settings.provider_config())
    return WalletResolver(client)


def _resolve_or_raise(resolver: WalletResolver, address: str) -> WalletResponse:
    try:
        snapshot = resolver.resolve(address)
    except ResolveError as e:
        logger.warning(f"Wallet lookup for {address!r} failed with {e.status_code}: {e}")
        headers = None
        if isinstance(e, RateLimited) and e.retry_after is not None:
            headers = {"Retry-After": str(math.ceil(e.retry_after))}
        raise HTTPException(status_code=e.status_code, detail=str(e), headers=headers)
    except Exception as e:
        logger.error(f"Unexpected error resolving wallet {address!r}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred"
        )

    logger.info(f"Wallet endpoint accessed, returning snapshot for: {address}")
    return WalletResponse.from_snapshot(snapshot)


@router.get(
    "/wallet/{address}",
    response_model=WalletResponse,
    summary="Get Wallet Balance and Transactions"
)
def get_wallet(
    address: str = Path(..., description="Base58 wallet address (32-44 characters)."),
    resolver: WalletResolver = Depends(get_resolver),
) -> WalletResponse:
    """
    Get a point-in-time snapshot of a wallet's balance and transaction identifiers.

    Returns:
        WalletResponse: address, balance and transactions as reported by the provider

    Raises:
        HTTPException: 400 invalid address, 404 unknown wallet, 429 provider throttling,
            502 malformed provider response, 503 provider unavailable, 500 otherwise
    """
    return _resolve_or_raise(resolver, address)


@router.get("/wallet/", response_model=WalletResponse, include_in_schema=False)
def get_wallet_without_address(
    resolver: WalletResolver = Depends(get_resolver),
) -> WalletResponse:
    """An empty path segment is an invalid address, answered with 400 like any other."""
    return _resolve_or_raise(resolver, "")
