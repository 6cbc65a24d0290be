"""Wiring of the bounty service into a WSGI server."""

from __future__ import annotations

import logging
from typing import Any
from wsgiref.simple_server import make_server

from bountysvc.db import Queries
from bountysvc.handler import Handler
from bountysvc.middleware import logging_middleware
from bountysvc.mux import ServeMux
from bountysvc.repository import DBRepository
from bountysvc.service import Service

logger = logging.getLogger(__name__)


def _split_address(address: str) -> tuple[str, int]:
    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid address {address!r}")
    return host, int(port)


class Router:
    """Owns the bounty handler and registers its routes."""

    def __init__(self, service: Service) -> None:
        self._handler = Handler(service, logging_middleware)

    def setup_routes(self, mux: ServeMux) -> None:
        self._handler.register_routes(mux)


class Server:
    """The bounty HTTP server over a database connection."""

    def __init__(self, connection: Any) -> None:
        service = Service(DBRepository(Queries(connection)))
        self._router = Router(service)

    def app(self) -> ServeMux:
        """Return the WSGI application with every route registered."""
        mux = ServeMux()
        self._router.setup_routes(mux)
        return mux

    def start(self, address: str) -> None:
        """Serve on an address such as ":8080" until interrupted."""
        host, port = _split_address(address)
        app = self.app()
        logger.info("Starting server on %s", address)
        with make_server(host, port, app) as httpd:
            httpd.serve_forever()