"""
MCP Adapters

MCP protocol adapters that expose the core functionality as MCP tools.
"""
from .handlers import MCPHandlers

__all__ = ["MCPHandlers"]
