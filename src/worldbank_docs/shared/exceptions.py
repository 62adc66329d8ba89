"""
Unified Exception Hierarchy for World Bank Documents MCP.

Exception Hierarchy:
    WorldBankDocsError (base)
    ├── APIError
    │   └── NetworkError
    ├── ValidationError
    │   ├── MissingParameterError
    │   └── InvalidParameterError
    ├── DataError
    │   ├── NotFoundError
    │   └── ParseError
    └── ConfigurationError

Nothing in this package retries: ``retryable`` only tells the agent whether
re-invoking the tool may help.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Any


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    WARNING = auto()  # Caller can fix the input and retry
    ERROR = auto()  # Failed, may succeed on re-invocation
    CRITICAL = auto()  # Cannot continue


class ErrorCategory(Enum):
    """Categories for error classification."""

    API = "api"
    VALIDATION = "validation"
    DATA = "data"
    CONFIGURATION = "config"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Rich context for error messages."""

    tool_name: str | None = None
    operation: str | None = None
    input_value: Any = None
    suggestion: str | None = None
    example: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class WorldBankDocsError(Exception):
    """
    Base exception for all World Bank Documents errors.

    Provides:
    - Structured error context
    - Severity classification
    - Agent-friendly formatting
    """

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        category: ErrorCategory = ErrorCategory.API,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.context = context or ErrorContext()
        self.severity = severity
        self.category = category
        self.retryable = retryable

    def with_tool(self, tool_name: str) -> WorldBankDocsError:
        """Attach the name of the tool that surfaced this error."""
        self.context = replace(self.context, tool_name=tool_name)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "error": str(self),
            "category": self.category.value,
            "severity": self.severity.name.lower(),
            "retryable": self.retryable,
        }
        if self.context.tool_name:
            result["tool"] = self.context.tool_name
        if self.context.suggestion:
            result["suggestion"] = self.context.suggestion
        if self.context.example:
            result["example"] = self.context.example
        return result

    def to_agent_message(self) -> str:
        """Format for Agent consumption (Markdown)."""
        parts = [f"❌ **Error**: {self}"]

        if self.context.suggestion:
            parts.append(f"💡 **Suggestion**: {self.context.suggestion}")
        if self.context.example:
            parts.append(f"📝 **Example**: `{self.context.example}`")
        if self.retryable:
            parts.append("🔄 This error may succeed if the tool is called again")

        return "\n".join(parts)


# =============================================================================
# API Errors
# =============================================================================


class APIError(WorldBankDocsError):
    """Base class for upstream API errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
        retryable: bool = True,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.ERROR,
            category=ErrorCategory.API,
            retryable=retryable,
        )


class NetworkError(APIError):
    """
    Raised when the upstream API cannot be reached or answers with a
    non-success HTTP status.

    ``status_code`` and ``reason`` are None for transport-level failures.
    """

    def __init__(
        self,
        message: str = "Network connection failed",
        *,
        status_code: int | None = None,
        reason: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message, context=context, retryable=True)
        self.status_code = status_code
        self.reason = reason

    @classmethod
    def from_status(cls, status_code: int, reason: str) -> NetworkError:
        return cls(
            f"API request failed: {status_code} {reason}".rstrip(),
            status_code=status_code,
            reason=reason,
        )

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.status_code is not None:
            result["status_code"] = self.status_code
        return result


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(WorldBankDocsError):
    """Base class for validation errors, raised before any network call."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.WARNING,
            category=ErrorCategory.VALIDATION,
            retryable=False,
        )


class MissingParameterError(ValidationError):
    """Raised when a required tool argument is absent or empty."""

    def __init__(
        self,
        param_name: str,
        *,
        example: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext()
        ctx = replace(
            ctx,
            input_value=param_name,
            suggestion=ctx.suggestion or f"Provide a value for '{param_name}'",
            example=example or ctx.example,
        )
        super().__init__(f"Missing required parameter: {param_name}", context=ctx)
        self.param_name = param_name


class InvalidParameterError(ValidationError):
    """Raised when a parameter value is outside its allowed set or range."""

    def __init__(
        self,
        param_name: str,
        value: Any,
        expected: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext()
        ctx = replace(ctx, input_value=value, suggestion=f"Expected {expected}")
        super().__init__(
            f"Invalid parameter '{param_name}': {value!r} (expected {expected})",
            context=ctx,
        )
        self.param_name = param_name


# =============================================================================
# Data Errors
# =============================================================================


class DataError(WorldBankDocsError):
    """Base class for data-related errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.ERROR,
            category=ErrorCategory.DATA,
            retryable=False,
        )


class NotFoundError(DataError):
    """Raised when requested data is not found."""

    def __init__(
        self,
        resource: str,
        identifier: str | None = None,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        msg = f"{resource} not found"
        if identifier:
            msg = f"{resource} not found: {identifier}"

        ctx = context or ErrorContext()
        ctx = replace(
            ctx,
            input_value=identifier,
            suggestion=ctx.suggestion or "Check the identifier and try again",
        )
        super().__init__(msg, context=ctx)
        self.identifier = identifier


class ParseError(DataError):
    """Raised when the upstream response body cannot be parsed."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        full_msg = f"Parse error: {message}"
        if source:
            full_msg = f"Parse error ({source}): {message}"
        super().__init__(full_msg, context=context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(WorldBankDocsError):
    """Raised for configuration-related errors at startup."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.CONFIGURATION,
            retryable=False,
        )
