"""HTTP access to the World Bank Documents API."""

from .fetcher import (
    DEFAULT_MIN_INTERVAL,
    DEFAULT_TIMEOUT,
    WORLDBANK_API_URL,
    RateLimitedFetcher,
    build_query_params,
)

__all__ = [
    "DEFAULT_MIN_INTERVAL",
    "DEFAULT_TIMEOUT",
    "WORLDBANK_API_URL",
    "RateLimitedFetcher",
    "build_query_params",
]
