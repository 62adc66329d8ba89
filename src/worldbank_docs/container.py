"""
Application DI Container (dependency-injector).

Centralizes service creation and lifecycle management.

Usage::

    from worldbank_docs.container import ApplicationContainer

    container = ApplicationContainer()
    container.config.from_dict({
        "api_url": "https://search.worldbank.org/api/v3/wds",
        "min_interval": 0.3,
        "timeout": 30.0,
    })

    client = container.client()

    # In tests, override any provider:
    container.fetcher.override(providers.Object(mock_fetcher))
"""

from __future__ import annotations

import logging

from dependency_injector import containers, providers

logger = logging.getLogger(__name__)


def _create_fetcher(api_url: str, min_interval: float, timeout: float) -> object:
    """Lazy factory for RateLimitedFetcher (avoids top-level httpx import)."""
    from worldbank_docs.infrastructure.http import RateLimitedFetcher

    logger.info(f"World Bank API: {api_url} (min interval {min_interval:.3f}s, timeout {timeout:.0f}s)")
    return RateLimitedFetcher(base_url=api_url, min_interval=min_interval, timeout=timeout)


def _create_client(fetcher: object) -> object:
    """Lazy factory for WorldBankClient."""
    from worldbank_docs.infrastructure.worldbank import WorldBankClient

    return WorldBankClient(fetcher)  # type: ignore[arg-type]


class ApplicationContainer(containers.DeclarativeContainer):
    """Central DI container.

    Manages:
    - ``fetcher``: the single rate-limited HTTP gateway
    - ``client``: query translator bound to that fetcher
    """

    config = providers.Configuration()

    fetcher = providers.Singleton(
        _create_fetcher,
        api_url=config.api_url,
        min_interval=config.min_interval,
        timeout=config.timeout,
    )

    client = providers.Singleton(
        _create_client,
        fetcher=fetcher,
    )
