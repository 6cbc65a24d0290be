import pytest

from bountysvc.mux import ServeMux, path_value


def _echo(name):
    def app(environ, start_response):
        start_response("200 OK", [])
        return [f"{name}:{path_value(environ, 'id')}".encode()]
    return app


def _call(mux, method, path):
    captured = {}

    def start_response(status, headers):
        captured["status"] = status
        captured["headers"] = dict(headers)

    body = b"".join(mux({"REQUEST_METHOD": method, "PATH_INFO": path}, start_response))
    return captured["status"], captured["headers"], body


@pytest.fixture
def mux():
    m = ServeMux()
    m.handle("GET /bounties", _echo("list"))
    m.handle("GET /bounties/{id}", _echo("one"))
    m.handle("PATCH /bounties/{id}", _echo("patch"))
    return m


def test_exact_and_wildcard(mux):
    assert _call(mux, "GET", "/bounties")[2] == b"list:"
    assert _call(mux, "GET", "/bounties/abc")[2] == b"one:abc"
    assert _call(mux, "PATCH", "/bounties/abc")[2] == b"patch:abc"


def test_not_found(mux):
    status, _, body = _call(mux, "GET", "/other")
    assert status.startswith("404")
    assert body == b"404 page not found\n"


def test_method_not_allowed(mux):
    status, headers, _ = _call(mux, "DELETE", "/bounties/abc")
    assert status.startswith("405")
    assert "PATCH" in headers["Allow"] and "GET" in headers["Allow"]


def test_empty_wildcard_does_not_match(mux):
    assert _call(mux, "GET", "/bounties/")[0].startswith("404")


def test_path_value_missing():
    assert path_value({}, "id") == ""


def test_duplicate_pattern_rejected(mux):
    with pytest.raises(ValueError):
        mux.handle("GET /bounties", _echo("again"))