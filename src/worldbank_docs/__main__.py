"""
Allow running the MCP server as: python -m worldbank_docs
"""

from __future__ import annotations

from .presentation.mcp_server.server import main

if __name__ == "__main__":
    main()
