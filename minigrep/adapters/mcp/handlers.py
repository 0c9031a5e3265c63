"""
MCP Tool Handlers

Shared handlers for MCP tools that use the hexagonal core.
"""
import asyncio
from typing import Any

from ...container import Container
from ...core.domain import CaseMode, SearchConfig
from ...core.errors import MinigrepError


class MCPHandlers:
    """Handlers for MCP tools using dependency injection"""

    def __init__(self, container: Container):
        self.container = container

    async def search_files(
        self,
        query: str,
        path: str,
        case_insensitive: bool = False
    ) -> dict[str, Any]:
        """Search a file or directory tree for lines containing query"""
        config = SearchConfig(
            query=query,
            target_path=path,
            case_mode=CaseMode.INSENSITIVE if case_insensitive else CaseMode.SENSITIVE
        )

        try:
            # The core is synchronous; keep the event loop free
            outcome = await asyncio.to_thread(self.container.search.execute, config)
        except MinigrepError as e:
            return {
                "success": False,
                "error": f"Failed to search: {str(e)}"
            }

        return {
            "success": True,
            "query": query,
            "path": path,
            "case_sensitive": config.case_sensitive,
            "results": [
                {
                    "path": result.path,
                    "matches": [
                        {"line_number": m.line_number, "content": m.content}
                        for m in result.matches
                    ]
                }
                for result in outcome.results
            ],
            "file_count": len(outcome),
            "match_count": outcome.match_count,
            "skipped": [
                {"path": entry.path, "reason": entry.reason}
                for entry in outcome.skipped
            ],
        }
