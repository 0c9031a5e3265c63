"""
minigrep MCP Server

MCP delivery layer - exposes the search use case as an MCP tool.
Separation of concerns: this file only handles MCP protocol.
"""
import argparse
import logging
import os

from mcp.server.fastmcp import FastMCP

from .adapters.mcp import MCPHandlers
from .container import Container
from .formatters import format_search_result

logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] [%(levelname)s] %(message)s",
    datefmt="%Y/%m/%d %H:%M:%S"
)
logger = logging.getLogger(__name__)

# Get host/port from env or default
HTTP_PORT = int(os.getenv("MINIGREP_HTTP_PORT", "6661"))
HTTP_HOST = os.getenv("MINIGREP_HTTP_HOST", "127.0.0.1")

# Initialize MCP server with HTTP config
mcp = FastMCP("minigrep", host=HTTP_HOST, port=HTTP_PORT)

handlers = MCPHandlers(Container())


@mcp.tool()
async def search_files(query: str, path: str, case_insensitive: bool = False) -> str:
    """
    Find lines containing a literal text in a file or directory tree.

    Args:
        query: Literal text to look for (not a regex). Empty matches every line.
        path: File or directory to search. Directories are searched recursively.
        case_insensitive: Ignore case when comparing (default: False)

    Returns:
        One block per matching file: the path, then "LINE: content" lines.
        Unreadable entries inside a directory are listed under SKIPPED.

    Example:
        search_files("duct", "./docs")
        → docs/sample.txt
          2: safe, fast, productive.
    """
    logger.info(f"search_files: query={query!r} path={path} case_insensitive={case_insensitive}")
    result = await handlers.search_files(query=query, path=path, case_insensitive=case_insensitive)

    if not result["success"]:
        logger.error(f"search_files FAILED: {result['error']}")
    else:
        logger.info(f"search_files: {result['match_count']} matches in {result['file_count']} files")

    return format_search_result(result)


def main():
    parser = argparse.ArgumentParser(
        description="minigrep MCP server - literal text search over local files"
    )
    parser.add_argument(
        "--transport",
        default="stdio",
        choices=["stdio", "streamable-http"],
        help="Transport method (default: stdio)"
    )
    parser.add_argument(
        "--host",
        default=None,
        help=f"Host to bind to for HTTP transport (default: {HTTP_HOST}, or set MINIGREP_HTTP_HOST)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help=f"Port to bind to for HTTP transport (default: {HTTP_PORT}, or set MINIGREP_HTTP_PORT)"
    )
    args = parser.parse_args()

    if args.host:
        mcp.settings.host = args.host
    if args.port:
        mcp.settings.port = args.port

    # Run the server
    if args.transport == "streamable-http":
        logger.info(f"Starting minigrep MCP on http://{mcp.settings.host}:{mcp.settings.port}")
        mcp.run(transport="streamable-http")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
