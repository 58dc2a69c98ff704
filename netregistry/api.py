# Copyright (c) Hathor Labs and its affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from typing import TYPE_CHECKING

from aiohttp import web
from structlog import get_logger

if TYPE_CHECKING:
    from netregistry.registry import NetworkRegistry

logger = get_logger()


class App:
    """Read-only API over a network registry."""

    def __init__(self, registry: "NetworkRegistry") -> None:
        """Init App."""
        super().__init__()
        self.log = logger.new()
        self.registry = registry
        self.app = web.Application()
        self.app.router.add_get("/health-check", self.health_check)
        self.app.router.add_get("/networks", self.list_networks)
        self.app.router.add_get("/networks/{key}", self.get_network)

        # Signal handler to add CORS headers when preparing the response
        self.app.on_response_prepare.append(self.on_prepare)

    async def on_prepare(
        self, request: web.Request, response: web.StreamResponse
    ) -> None:
        """Set CORS headers for all responses on_prepare."""
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Methods"] = request.method
        response.headers[
            "Access-Control-Allow-Headers"
        ] = "x-requested-with,content-type"
        response.headers["Access-Control-Max-Age"] = "604800"

    async def health_check(self, request: web.Request) -> web.Response:
        """Return that the service is running."""
        return web.json_response({"success": True})

    async def list_networks(self, request: web.Request) -> web.Response:
        """Return all networks in the current mode."""
        return web.json_response({
            "mode": self.registry.mode.value,
            "networks": [network.to_dict() for network in self.registry],
        })

    async def get_network(self, request: web.Request) -> web.Response:
        """Return a single network.

        Method: GET
        Path:
        - key: str, name, alias or prefix of the network, or a number (port or magic)
        Query:
        - field: str, optional and repeatable, only match `key` against these fields
        """
        key = request.match_info["key"]
        fields = request.query.getall("field", [])
        network = self.registry.lookup(key, fields or None)
        if network is None:
            self.log.debug("network-not-found", key=key, fields=fields)
            return web.json_response({"error": "network-not-found"}, status=404)
        return web.json_response(network.to_dict())
