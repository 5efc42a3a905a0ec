"""
ddg_search/app.py

HTTP front end (FastAPI).

Routes:
  POST /search   {"query": str} → raw JSON array of search results
  GET  /tools    → {"tools": [{"name", "description"}, ...]}
  GET  /         static search page (static/index.html)
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from .core.config import Settings, configure_logging
from .core.context import LoggingContext
from .core.formatters import format_results_json
from .tools.builtin import build_default_registry
from .tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


class SearchRequest(BaseModel):
    query: str = ""


def _to_json(result: Any) -> Any:
    # The search tool answers with a message string if the searcher blew up
    if isinstance(result, str):
        return result
    return format_results_json(result)


def create_app(
    registry: ToolRegistry,
    static_dir: Optional[Union[str, Path]] = STATIC_DIR,
    name: str = "ddg-search",
) -> FastAPI:
    app = FastAPI(title=name)
    app.state.registry = registry

    @app.post("/search")
    async def search(body: SearchRequest):
        ctx = LoggingContext()
        try:
            results = await registry.call("search", query=body.query, ctx=ctx)
            return _to_json(results)
        except Exception:
            logger.exception("Search error")
            return JSONResponse(
                status_code=500,
                content={"error": "An error occurred during search."},
            )

    @app.get("/tools")
    async def list_tools() -> dict:
        return {"tools": registry.describe()}

    if static_dir is not None and Path(static_dir).is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")

    return app


def main() -> None:
    import uvicorn

    settings = Settings.from_env()
    configure_logging(settings.log_level)
    app = create_app(build_default_registry(settings))
    logger.info("ddg-search HTTP server running on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
