"""
ddg_search/server.py

MCP stdio server exposing every tool in a ToolRegistry.

  Tools (default registry):
    • search         : DuckDuckGo search → numbered text digest
    • fetch_content  : Fetch + extract a single URL → plain text
"""
from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, List

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from .core.config import SearchResult, Settings, configure_logging
from .core.context import LoggingContext
from .core.formatters import format_results_for_llm
from .tools.builtin import build_default_registry
from .tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


def render_result(result: Any) -> str:
    """Turn a tool's return value into the text sent back to the client."""
    if isinstance(result, str):
        return result
    if isinstance(result, list) and all(isinstance(r, SearchResult) for r in result):
        return format_results_for_llm(result)
    return json.dumps(result, ensure_ascii=False, indent=2)


async def run_tool(registry: ToolRegistry, name: str, arguments: dict[str, Any]) -> str:
    if name not in registry:
        return json.dumps({"error": f"Unknown tool: {name}"})
    # Only schema-declared arguments reach the handler; ctx is always ours
    properties = registry.get(name).input_schema.get("properties", {})
    kwargs = {k: v for k, v in arguments.items() if k in properties}
    result = await registry.call(name, ctx=LoggingContext(), **kwargs)
    return render_result(result)


def build_mcp_server(registry: ToolRegistry, name: str = "ddg-search") -> Server:
    app = Server(name)

    @app.list_tools()
    async def list_tools() -> List[Tool]:
        return [
            Tool(name=t.name, description=t.description, inputSchema=t.input_schema)
            for t in registry
        ]

    @app.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
        try:
            text = await run_tool(registry, name, arguments or {})
            return CallToolResult(content=[TextContent(type="text", text=text)])
        except Exception as exc:
            logger.exception("Tool %r raised: %s", name, exc)
            return CallToolResult(
                content=[TextContent(type="text", text=json.dumps({"error": str(exc)}))],
                isError=True,
            )

    return app


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

async def _serve(app: Server) -> None:
    logger.info("Starting ddg-search MCP server")
    async with stdio_server() as (read_stream, write_stream):
        await app.run(
            read_stream,
            write_stream,
            app.create_initialization_options(),
        )


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    app = build_mcp_server(build_default_registry(settings))
    asyncio.run(_serve(app))


if __name__ == "__main__":
    main()
