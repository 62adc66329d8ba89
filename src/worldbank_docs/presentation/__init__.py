"""
Presentation Layer

Contains:
- formatting: Fixed-width columnar text rendering
- mcp_server: FastMCP stdio server and tools
"""
