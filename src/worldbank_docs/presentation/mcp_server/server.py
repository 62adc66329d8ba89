"""
World Bank Documents MCP Server

A stdio Model Context Protocol server for the World Bank Documents &
Reports search API.

Architecture:
- instructions.py: SERVER_INSTRUCTIONS for AI agents
- tool_registry.py: Centralized tool registration
- tools/: Individual tool implementations by category
- container: DI container (dependency-injector) for service lifecycle
"""

from __future__ import annotations

import logging
import os
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import TYPE_CHECKING, Any, cast

from mcp.server.fastmcp import FastMCP

from worldbank_docs.container import ApplicationContainer
from worldbank_docs.infrastructure.http import DEFAULT_MIN_INTERVAL, DEFAULT_TIMEOUT, WORLDBANK_API_URL
from worldbank_docs.shared.exceptions import ConfigurationError

from .instructions import SERVER_INSTRUCTIONS
from .tool_registry import register_all_mcp_tools

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable, Mapping

    from worldbank_docs.infrastructure.http import RateLimitedFetcher
    from worldbank_docs.infrastructure.worldbank import WorldBankClient

logger = logging.getLogger(__name__)

SERVER_NAME = "world-bank-mcp"
VERSION = "1.0.0"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# ── Module-level DI container ──────────────────────────────────────────────
_container: ApplicationContainer | None = None


def get_container() -> ApplicationContainer:
    """Get the application DI container.

    Raises:
        RuntimeError: If ``create_server()`` has not been called yet.
    """
    if _container is None:
        msg = "Container not initialized. Call create_server() first."
        raise RuntimeError(msg)
    return _container


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as e:
        msg = f"{name} must be a number, got {raw!r}"
        raise ConfigurationError(msg) from e
    if value < 0:
        msg = f"{name} must not be negative, got {raw!r}"
        raise ConfigurationError(msg)
    return value


def load_settings(env: Mapping[str, str] | None = None) -> dict[str, Any]:
    """
    Read server settings from environment variables.

    Variables:
        WORLDBANK_API_URL: API endpoint
        WORLDBANK_RATE_LIMIT_MS: Minimum milliseconds between requests (default 300)
        WORLDBANK_TIMEOUT: HTTP timeout in seconds (default 30)
        WORLDBANK_LOG_LEVEL: Logging level name (default INFO)

    Raises:
        ConfigurationError: A numeric variable is malformed or negative
    """
    env = os.environ if env is None else env
    log_level = env.get("WORLDBANK_LOG_LEVEL", "").strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(log_level), int):
        msg = f"WORLDBANK_LOG_LEVEL must be a logging level name, got {log_level!r}"
        raise ConfigurationError(msg)
    return {
        "api_url": env.get("WORLDBANK_API_URL", "").strip() or WORLDBANK_API_URL,
        "min_interval": _env_float(env, "WORLDBANK_RATE_LIMIT_MS", DEFAULT_MIN_INTERVAL * 1000) / 1000,
        "timeout": _env_float(env, "WORLDBANK_TIMEOUT", DEFAULT_TIMEOUT),
        "log_level": log_level,
    }


def _make_lifespan(
    container: ApplicationContainer,
) -> Callable[[FastMCP[Any]], AbstractAsyncContextManager[ApplicationContainer]]:
    """Create a FastMCP lifespan handler bound to *container*."""

    @asynccontextmanager
    async def _lifespan(server: FastMCP[Any]) -> AsyncIterator[ApplicationContainer]:
        """Application lifecycle: startup, yield, shutdown."""
        logger.info("Lifecycle: startup, resources ready")
        try:
            yield container
        finally:
            fetcher = cast("RateLimitedFetcher", container.fetcher())
            await fetcher.close()
            logger.info("Lifecycle: shutdown, HTTP client closed")

    return _lifespan


def create_server(
    api_url: str = WORLDBANK_API_URL,
    min_interval: float = DEFAULT_MIN_INTERVAL,
    timeout: float = DEFAULT_TIMEOUT,
    name: str = SERVER_NAME,
) -> FastMCP:
    """
    Create and configure the World Bank Documents MCP server.

    Args:
        api_url: World Bank Documents API endpoint.
        min_interval: Minimum seconds between outbound requests.
        timeout: HTTP timeout in seconds.
        name: Server name.

    Returns:
        Configured FastMCP server instance.
    """
    global _container
    logger.info(f"Initializing {name} v{VERSION}...")

    # ── DI container ────────────────────────────────────────────────────
    _container = ApplicationContainer()
    _container.config.from_dict(
        {
            "api_url": api_url,
            "min_interval": min_interval,
            "timeout": timeout,
        }
    )
    client = cast("WorldBankClient", _container.client())

    # ── Create MCP server with lifespan ─────────────────────────────────
    mcp = FastMCP(
        name,
        instructions=SERVER_INSTRUCTIONS,
        lifespan=_make_lifespan(_container),
    )

    stats = register_all_mcp_tools(mcp=mcp, client=client)
    logger.info("Tool registration complete: %s", stats)

    return mcp


def main() -> None:
    """Run the MCP server over stdio."""
    settings = load_settings()

    # stdout carries the protocol; basicConfig logs to stderr
    logging.basicConfig(level=settings["log_level"], format=LOG_FORMAT)

    server = create_server(
        api_url=settings["api_url"],
        min_interval=settings["min_interval"],
        timeout=settings["timeout"],
    )
    logger.info(f"{SERVER_NAME} v{VERSION} connecting via stdio")
    server.run()


if __name__ == "__main__":
    main()
