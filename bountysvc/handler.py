"""HTTP handlers for the bounty endpoints."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable
from http import HTTPStatus
from typing import Any

from bountysvc.model import Bounty
from bountysvc.mux import ServeMux, path_value
from bountysvc.service import Service

logger = logging.getLogger(__name__)

WSGIApp = Callable[[dict[str, Any], Callable[..., Any]], Iterable[bytes]]
Middleware = Callable[[WSGIApp], WSGIApp]


def _status(code: HTTPStatus) -> str:
    return f"{code.value} {code.phrase}"


def _error(start_response: Callable[..., Any], message: str, code: HTTPStatus) -> list[bytes]:
    body = (message + "\n").encode()
    start_response(_status(code), [
        ("Content-Type", "text/plain; charset=utf-8"),
        ("X-Content-Type-Options", "nosniff"),
        ("Content-Length", str(len(body))),
    ])
    return [body]


def _write_json(start_response: Callable[..., Any], data: Any, code: HTTPStatus) -> list[bytes]:
    body = (json.dumps(data, ensure_ascii=False) + "\n").encode()
    start_response(_status(code), [
        ("Content-Type", "application/json"),
        ("Content-Length", str(len(body))),
    ])
    return [body]


def _read_bounty(environ: dict[str, Any]) -> Bounty:
    """Decode the first JSON value of the request body into a bounty."""
    stream = environ.get("wsgi.input")
    try:
        length = int(environ.get("CONTENT_LENGTH") or 0)
    except ValueError:
        length = 0
    raw = stream.read(length) if stream is not None and length > 0 else b""
    text = raw.decode("utf-8").lstrip()
    if not text:
        raise ValueError("EOF")
    data, _ = json.JSONDecoder().raw_decode(text)
    if data is None:
        return Bounty()
    return Bounty.from_dict(data)


class Handler:
    """Serves bounty requests through a service, wrapped in the given middlewares."""

    def __init__(self, service: Service, *middlewares: Middleware) -> None:
        self._service = service
        self._middlewares = middlewares

    def register_routes(self, mux: ServeMux) -> None:
        mux.handle("GET /bounties", self._wrap(self.handle_get_bounties))
        mux.handle("POST /bounties", self._wrap(self.handle_create_bounty))
        mux.handle("GET /bounties/{id}", self._wrap(self.handle_get_bounty_by_id))
        mux.handle("PATCH /bounties/{id}", self._wrap(self.handle_update_bounty))

    def _wrap(self, app: WSGIApp) -> WSGIApp:
        for middleware in reversed(self._middlewares):
            app = middleware(app)
        return app

    def handle_get_bounties(self, environ, start_response):
        try:
            bounties = self._service.get_bounties()
        except Exception as exc:
            logger.error("Error getting bounties: %s", exc)
            return _error(start_response, "Failed to get bounties", HTTPStatus.INTERNAL_SERVER_ERROR)
        return _write_json(start_response, [b.to_dict() for b in bounties], HTTPStatus.OK)

    def handle_get_bounty_by_id(self, environ, start_response):
        bounty_id = path_value(environ, "id")
        if not bounty_id:
            return _error(start_response, "Bounty ID is required", HTTPStatus.BAD_REQUEST)
        try:
            bounty = self._service.get_bounty_by_id(bounty_id)
        except Exception as exc:
            logger.error("Error getting bounty by ID: %s", exc)
            return _error(start_response, "Failed to get bounty by ID", HTTPStatus.INTERNAL_SERVER_ERROR)
        return _write_json(start_response, bounty.to_dict(), HTTPStatus.OK)

    def handle_create_bounty(self, environ, start_response):
        try:
            bounty = _read_bounty(environ)
        except ValueError as exc:
            logger.error("Error decoding create bounty request: %s", exc)
            return _error(start_response, "Invalid request body", HTTPStatus.BAD_REQUEST)
        try:
            self._service.create_bounty(bounty)
        except Exception as exc:
            logger.error("Error creating bounty: %s", exc)
            return _error(start_response, "Failed to create bounty", HTTPStatus.INTERNAL_SERVER_ERROR)
        return _write_json(start_response, bounty.to_dict(), HTTPStatus.CREATED)

    def handle_update_bounty(self, environ, start_response):
        bounty_id = path_value(environ, "id")
        if not bounty_id:
            return _error(start_response, "Bounty ID is required", HTTPStatus.BAD_REQUEST)
        try:
            bounty = _read_bounty(environ)
        except ValueError as exc:
            logger.error("Error decoding update bounty request: %s", exc)
            return _error(start_response, "Invalid request body", HTTPStatus.BAD_REQUEST)
        bounty.id = bounty_id
        try:
            self._service.update_bounty(bounty)
        except Exception as exc:
            logger.error("Error updating bounty: %s", exc)
            return _error(start_response, "Failed to update bounty", HTTPStatus.INTERNAL_SERVER_ERROR)
        return _write_json(start_response, bounty.to_dict(), HTTPStatus.OK)