"""
Web playground - a small JSON API for browsing and running nodes.

Routes:
    GET  /api/nodes[?category=C]   node metadata, optionally by category
    GET  /api/nodes/{type}         metadata, input fields, example input, services
    POST /api/execute              {nodeType, input, credentials, variables, mockMode}

Uses aiohttp so the server runs inside the caller's asyncio loop:

    server = PlaygroundServer(Playground(), PlaygroundServerConfig(port=3210))
    await server.start()
    ...
    await server.stop()
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from aiohttp import web

from jam_core.node import NodeCategory
from jam_playground.runner import Playground, UnknownNodeError

logger = logging.getLogger(__name__)

PLAYGROUND_KEY = web.AppKey("playground", Playground)


@dataclass
class PlaygroundServerConfig:
    host: str = "127.0.0.1"
    port: int = 3210


def _dumps(data: Any) -> str:
    return json.dumps(data, default=str)


def _error(message: str, status: int) -> web.Response:
    return web.json_response({"success": False, "error": message}, status=status)


def _is_credentials_mapping(value: Any) -> bool:
    return isinstance(value, dict) and all(
        isinstance(fields, dict) and all(isinstance(v, str) for v in fields.values())
        for fields in value.values()
    )


async def list_nodes(request: web.Request) -> web.Response:
    playground = request.app[PLAYGROUND_KEY]
    category = request.query.get("category")
    if category:
        try:
            definitions = playground.registry.get_by_category(category)
        except ValueError:
            valid = ", ".join(c.value for c in NodeCategory)
            return _error(f"Unknown category '{category}'. Valid categories: {valid}", 400)
    else:
        definitions = playground.registry.get_all()
    return web.json_response(
        {"nodes": [definition.metadata().model_dump(mode="json") for definition in definitions]}
    )


async def get_node(request: web.Request) -> web.Response:
    playground = request.app[PLAYGROUND_KEY]
    try:
        return web.json_response(playground.describe_node(request.match_info["node_type"]), dumps=_dumps)
    except UnknownNodeError as e:
        return _error(str(e), 404)


async def execute(request: web.Request) -> web.Response:
    playground = request.app[PLAYGROUND_KEY]
    try:
        body = await request.json()
    except (json.JSONDecodeError, ValueError):
        return _error("Request body must be valid JSON", 400)
    if not isinstance(body, dict):
        return _error("Request body must be a JSON object", 400)

    node_type = body.get("nodeType")
    if not isinstance(node_type, str) or not node_type:
        return _error("nodeType is required", 400)

    credentials = body.get("credentials") or {}
    if not _is_credentials_mapping(credentials):
        return _error("credentials must map service names to string fields", 400)
    variables = body.get("variables") or {}
    if not isinstance(variables, dict):
        return _error("variables must be a JSON object", 400)

    try:
        result = await playground.execute(
            node_type,
            body.get("input") or {},
            credentials=credentials,
            variables=variables,
            mock=bool(body.get("mockMode")),
        )
    except UnknownNodeError as e:
        return _error(str(e), 404)
    except Exception as e:
        logger.exception(f"Unexpected error executing '{node_type}'")
        return _error(f"Internal error: {e}", 500)

    status = 400 if not result.success and (result.error or "").startswith("Invalid input:") else 200
    return web.json_response(result.to_dict(), status=status, dumps=_dumps)


def create_app(playground: Playground | None = None) -> web.Application:
    app = web.Application()
    app[PLAYGROUND_KEY] = playground or Playground()
    app.router.add_get("/api/nodes", list_nodes)
    app.router.add_get("/api/nodes/{node_type}", get_node)
    app.router.add_post("/api/execute", execute)
    return app


class PlaygroundServer:
    """
    Embedded HTTP server for the web playground.

    Lifecycle:
        server = PlaygroundServer(playground, config)
        await server.start()
        # ... server running ...
        await server.stop()
    """

    def __init__(
        self,
        playground: Playground | None = None,
        config: PlaygroundServerConfig | None = None,
    ):
        self._playground = playground
        self._config = config or PlaygroundServerConfig()
        self._runner: web.AppRunner | None = None
        self._site: web.TCPSite | None = None

    async def start(self) -> None:
        self._runner = web.AppRunner(create_app(self._playground))
        await self._runner.setup()
        self._site = web.TCPSite(self._runner, self._config.host, self._config.port)
        await self._site.start()
        logger.info(f"Playground server started on http://{self._config.host}:{self.port}")

    async def stop(self) -> None:
        if self._runner:
            await self._runner.cleanup()
            self._runner = None
            self._site = None
            logger.info("Playground server stopped")

    @property
    def is_running(self) -> bool:
        return self._site is not None

    @property
    def port(self) -> int | None:
        """Return the actual listening port (useful when configured with port=0)."""
        if self._site and self._site._server and self._site._server.sockets:
            return self._site._server.sockets[0].getsockname()[1]
        return None
