"""
tools/registry.py

Named, described tool callables shared by the HTTP and MCP front ends.

A registry is built once at startup (see build_registry) and handed to
create_app / build_mcp_server; nothing registers tools at import time.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Iterator, List, Optional

ToolHandler = Callable[..., Awaitable[Any]]

EMPTY_SCHEMA = {"type": "object", "properties": {}}


@dataclass(frozen=True)
class Tool:
    name: str
    description: str
    handler: ToolHandler
    input_schema: dict


class ToolRegistry:
    """Insertion-ordered mapping of tool name → Tool."""

    def __init__(self) -> None:
        self._tools: Dict[str, Tool] = {}

    def register(
        self,
        handler: ToolHandler,
        description: str,
        input_schema: Optional[dict] = None,
    ) -> Tool:
        name = handler.__name__
        if name in self._tools:
            raise ValueError(f"Tool already registered: {name}")
        tool = Tool(
            name=name,
            description=description,
            handler=handler,
            input_schema=input_schema or copy.deepcopy(EMPTY_SCHEMA),
        )
        self._tools[name] = tool
        return tool

    def tool(
        self, description: str, input_schema: Optional[dict] = None,
    ) -> Callable[[ToolHandler], ToolHandler]:
        """Decorator form of register(); returns the handler unchanged."""
        def decorator(handler: ToolHandler) -> ToolHandler:
            self.register(handler, description, input_schema)
            return handler
        return decorator

    def get(self, name: str) -> Tool:
        try:
            return self._tools[name]
        except KeyError:
            raise KeyError(f"Unknown tool: {name}") from None

    def names(self) -> List[str]:
        return list(self._tools)

    def describe(self) -> List[dict]:
        return [{"name": t.name, "description": t.description} for t in self._tools.values()]

    async def call(self, name: str, **kwargs: Any) -> Any:
        return await self.get(name).handler(**kwargs)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[Tool]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)
