# app/core/errors.py
"""
Exception taxonomy for wallet lookups.

UpstreamError subclasses are raised by the upstream client and describe what
the provider did. ResolveError subclasses are raised by the resolver and
describe what the caller should see; each carries the HTTP status the API
boundary answers with.
"""
from typing import Optional


class WalletServiceError(Exception):
    """Base class for all wallet lookup failures."""


# --- Upstream provider errors ---

class UpstreamError(WalletServiceError):
    """The upstream wallet data provider could not produce a usable answer."""


class UpstreamNotFound(UpstreamError):
    """Provider reports the address as unknown."""


class UpstreamRateLimited(UpstreamError):
    """Provider is throttling us."""

    def __init__(self, message: str, retry_after: Optional[float] = None):
        super().__init__(message)
        self.retry_after = retry_after


class UpstreamUnavailable(UpstreamError):
    """Network failure, timeout, or provider-side error after retries."""


class UpstreamMalformed(UpstreamError):
    """Provider response failed schema validation."""


# --- Resolver (domain) errors ---

class ResolveError(WalletServiceError):
    status_code: int = 500


class InvalidAddress(ResolveError):
    status_code = 400


class WalletNotFound(ResolveError):
    status_code = 404


class RateLimited(ResolveError):
    status_code = 429

    def __init__(self, message: str, retry_after: Optional[float] = None):
        super().__init__(message)
        self.retry_after = retry_after


class Unavailable(ResolveError):
    status_code = 503


class MalformedUpstreamResponse(ResolveError):
    status_code = 502
