# app/services/upstream.py
"""
Client for the upstream wallet data provider.

The provider's wire schema is validated and flattened here, so nothing outside
this module depends on how the provider shapes its JSON.
"""
import logging
import time
from typing import Callable, List, Optional, Protocol, Union, runtime_checkable
from urllib.parse import urljoin

import requests
from requests.exceptions import RequestException
from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from app.core.config import ProviderConfig
from app.core.version import VERSION
from app.core.errors import (
    UpstreamMalformed,
    UpstreamNotFound,
    UpstreamRateLimited,
    UpstreamUnavailable,
)
from app.services.address import Address
from app.services.models import ProviderResponse

logger = logging.getLogger(__name__)

USER_AGENT = f"wallet-snapshot-gateway/{VERSION}"


@runtime_checkable
class UpstreamClient(Protocol):
    """Anything that can fetch raw wallet data for a validated address."""

    def fetch(self, address: Address) -> ProviderResponse:
        ...


class WireTransaction(BaseModel):
    model_config = ConfigDict(extra="ignore")

    hash: StrictStr


class WireWalletPayload(BaseModel):
    """Provider JSON for GET /wallet/{address}. Unknown keys are ignored."""
    model_config = ConfigDict(extra="ignore")

    # NaN and Infinity are valid to requests.Response.json() but not a balance
    balance: float = Field(strict=True, allow_inf_nan=False)
    transactions: List[Union[StrictStr, WireTransaction]]


class _TransientFailure(UpstreamUnavailable):
    """Connection error, timeout or 5xx; eligible for another attempt."""


def parse_retry_after(value: Optional[str]) -> Optional[float]:
    """Parse a Retry-After header given in seconds. HTTP-date values are ignored."""
    if not value:
        return None
    try:
        seconds = float(value)
    except ValueError:
        return None
    return seconds if seconds >= 0 else None


def parse_wallet_payload(data: object) -> ProviderResponse:
    """
    Validate a decoded provider body and convert it to a ProviderResponse.

    Raises:
        UpstreamMalformed: If the body does not match the expected schema.
    """
    if not isinstance(data, dict):
        raise UpstreamMalformed(f"Expected a JSON object from provider, got {type(data).__name__}")
    try:
        payload = WireWalletPayload.model_validate(data)
    except ValidationError as e:
        raise UpstreamMalformed(f"Provider response failed validation: {e}") from e

    transactions = tuple(
        tx if isinstance(tx, str) else tx.hash
        for tx in payload.transactions
    )
    return ProviderResponse(balance=float(payload.balance), transactions=transactions)


class HttpUpstreamClient:
    """
    Fetches wallet data from a SolanaTracker-style REST provider.

    One fetch makes at most config.max_retries + 1 attempts. Only connection
    errors, timeouts and 5xx answers are retried, with exponential backoff.
    """

    def __init__(
        self,
        config: ProviderConfig,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._config = config
        self._sleep = sleep
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    @property
    def config(self) -> ProviderConfig:
        return self._config

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "HttpUpstreamClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _headers(self) -> dict:
        headers = {"Accept": "application/json", "User-Agent": USER_AGENT}
        if self._config.api_key:
            headers["x-api-key"] = self._config.api_key
        return headers

    def _wallet_url(self, address: Address) -> str:
        return urljoin(self._config.base_url.rstrip("/") + "/", f"wallet/{address}")

    def _get(self, url: str) -> requests.Response:
        try:
            response = self._session.get(url, headers=self._headers(), timeout=self._config.timeout)
        except (requests.ConnectionError, requests.Timeout) as e:
            raise _TransientFailure(f"Network error contacting wallet provider: {e}") from e
        except RequestException as e:
            raise UpstreamUnavailable(f"Request to wallet provider failed: {e}") from e

        if response.status_code >= 500:
            raise _TransientFailure(f"Wallet provider returned HTTP {response.status_code}")
        return response

    def _log_retry(self, retry_state) -> None:
        error = retry_state.outcome.exception()
        logger.warning(
            f"Wallet provider attempt {retry_state.attempt_number}/{self._config.max_retries + 1} failed: {error}; retrying"
        )

    def fetch(self, address: Address) -> ProviderResponse:
        """
        Fetch balance and transactions for an already validated address.

        Raises:
            UpstreamNotFound: Provider answered 404.
            UpstreamRateLimited: Provider answered 429.
            UpstreamUnavailable: Retries exhausted, or the provider rejected the request.
            UpstreamMalformed: Body is not JSON or fails schema validation.
        """
        url = self._wallet_url(address)
        retrying = Retrying(
            retry=retry_if_exception_type(_TransientFailure),
            stop=stop_after_attempt(self._config.max_retries + 1),
            wait=wait_exponential(multiplier=self._config.backoff, max=self._config.backoff_max),
            before_sleep=self._log_retry,
            sleep=self._sleep,
            reraise=True,
        )
        try:
            response = retrying(self._get, url)
        except _TransientFailure as e:
            logger.error(f"Wallet provider unavailable for {address} ({url}): {e}")
            raise UpstreamUnavailable(
                f"Wallet provider unavailable after {self._config.max_retries + 1} attempts: {e}"
            ) from e

        status = response.status_code
        if status == 404:
            raise UpstreamNotFound(f"Wallet provider has no record of address {address}")
        if status == 429:
            retry_after = parse_retry_after(response.headers.get("Retry-After"))
            logger.warning(f"Wallet provider rate limited request for {address} (retry after: {retry_after})")
            raise UpstreamRateLimited("Wallet provider rate limit reached", retry_after=retry_after)
        if not 200 <= status < 300:
            logger.error(f"Wallet provider rejected request for {address}: HTTP {status}")
            raise UpstreamUnavailable(f"Wallet provider rejected request: HTTP {status}")

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamMalformed(f"Wallet provider returned a non-JSON body: {e}") from e

        return parse_wallet_payload(data)
