"""
Shared kernel for World Bank Documents MCP.

Provides the unified exception hierarchy used by every layer.
"""

from .exceptions import (
    APIError,
    ConfigurationError,
    DataError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidParameterError,
    MissingParameterError,
    NetworkError,
    NotFoundError,
    ParseError,
    ValidationError,
    WorldBankDocsError,
)

__all__ = [
    "APIError",
    "ConfigurationError",
    "DataError",
    "ErrorCategory",
    "ErrorContext",
    "ErrorSeverity",
    "InvalidParameterError",
    "MissingParameterError",
    "NetworkError",
    "NotFoundError",
    "ParseError",
    "ValidationError",
    "WorldBankDocsError",
]
