"""
Infrastructure Layer - External Systems Integration

Contains:
- http: Rate-limited fetcher for the World Bank Documents API
- worldbank: Query translation and response normalization
"""

from .http import RateLimitedFetcher
from .worldbank import WorldBankClient

__all__ = [
    "RateLimitedFetcher",
    "WorldBankClient",
]
