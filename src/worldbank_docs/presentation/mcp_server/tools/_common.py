"""
Common utilities for MCP tools.

Shared pieces:
- Read-only tool annotations
- ResponseFormatter: text + structured payload results, error results
"""

import logging
from typing import Any

from mcp.types import CallToolResult, TextContent, ToolAnnotations

from worldbank_docs.shared.exceptions import WorldBankDocsError

logger = logging.getLogger(__name__)


def read_only_annotations(title: str) -> ToolAnnotations:
    """Annotations shared by every tool: read-only, non-destructive."""
    return ToolAnnotations(
        title=title,
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    )


class ResponseFormatter:
    """Builds the two parallel representations every tool returns."""

    @staticmethod
    def success(text: str, payload: dict[str, Any]) -> CallToolResult:
        return CallToolResult(
            content=[TextContent(type="text", text=text)],
            structuredContent=payload,
        )

    @staticmethod
    def error(error: Exception | str, tool_name: str | None = None) -> CallToolResult:
        """
        Convert an error into a user-visible error result.

        Domain errors render their agent message; anything else is shown as
        a plain ``Error: ...`` line.
        """
        if isinstance(error, WorldBankDocsError):
            if tool_name and not error.context.tool_name:
                error.with_tool(tool_name)
            text = error.to_agent_message()
        else:
            text = f"Error: {error or 'Internal server error'}"
        return CallToolResult(
            content=[TextContent(type="text", text=text)],
            isError=True,
        )
