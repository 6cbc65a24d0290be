"""A small request multiplexer with method-qualified patterns and path wildcards."""

from __future__ import annotations

from typing import Any

_PATH_VALUES_KEY = "bountysvc.path_values"


def _match(segments: tuple[str, ...], path: str) -> dict[str, str] | None:
    parts = path.split("/")[1:]
    if len(parts) != len(segments):
        return None
    values = {}
    for pattern, part in zip(segments, parts):
        if pattern.startswith("{") and pattern.endswith("}"):
            if not part:
                return None
            values[pattern[1:-1]] = part
        elif pattern != part:
            return None
    return values


def _plain(start_response, status: str, message: str, extra=()) -> list[bytes]:
    body = (message + "\n").encode()
    start_response(status, [
        ("Content-Type", "text/plain; charset=utf-8"),
        ("X-Content-Type-Options", "nosniff"),
        ("Content-Length", str(len(body))),
        *extra,
    ])
    return [body]


class ServeMux:
    """Dispatches WSGI requests to apps registered under "METHOD /path/{name}" patterns."""

    def __init__(self) -> None:
        self._routes: list[tuple[str, tuple[str, ...], Any]] = []

    def handle(self, pattern: str, app) -> None:
        method, _, path = pattern.strip().rpartition(" ")
        method = method.strip()
        if not path.startswith("/"):
            raise ValueError(f"invalid pattern {pattern!r}")
        segments = tuple(path.split("/")[1:])
        if any(m == method and s == segments for m, s, _ in self._routes):
            raise ValueError(f"pattern {pattern!r} conflicts with an existing pattern")
        self._routes.append((method, segments, app))

    def __call__(self, environ: dict[str, Any], start_response):
        method = environ.get("REQUEST_METHOD", "GET")
        path = environ.get("PATH_INFO", "") or "/"
        allowed: set[str] = set()
        for route_method, segments, app in self._routes:
            values = _match(segments, path)
            if values is None:
                continue
            if route_method in ("", method) or (route_method == "GET" and method == "HEAD"):
                environ[_PATH_VALUES_KEY] = values
                return app(environ, start_response)
            allowed.add(route_method)
            if route_method == "GET":
                allowed.add("HEAD")
        if allowed:
            return _plain(start_response, "405 Method Not Allowed", "Method Not Allowed",
                          [("Allow", ", ".join(sorted(allowed)))])
        return _plain(start_response, "404 Not Found", "404 page not found")


def path_value(environ: dict[str, Any], name: str) -> str:
    """Return the wildcard value matched for name, or "" when there is none."""
    return environ.get(_PATH_VALUES_KEY, {}).get(name, "")