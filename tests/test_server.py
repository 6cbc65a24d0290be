import io
import json
import sqlite3

import pytest

from bountysvc.server import Server


@pytest.fixture
def app():
    connection = sqlite3.connect(":memory:")
    connection.execute(
        "CREATE TABLE bounties (id TEXT PRIMARY KEY, title TEXT NOT NULL, description TEXT, points INTEGER NOT NULL)"
    )
    yield Server(connection).app()
    connection.close()


def _call(app, method, path, body=b""):
    captured = {}
    environ = {"REQUEST_METHOD": method, "PATH_INFO": path,
               "CONTENT_LENGTH": str(len(body)), "wsgi.input": io.BytesIO(body)}
    out = b"".join(app(environ, lambda s, h: captured.update(status=s)))
    return captured["status"], out


def test_create_then_fetch(app):
    status, body = _call(app, "POST", "/bounties", b'{"title":"XSS","description":"d","points":10}')
    assert status == "201 Created"
    created = json.loads(body)
    status, body = _call(app, "GET", "/bounties/" + created["id"])
    assert status == "200 OK"
    assert json.loads(body) == created
    assert json.loads(_call(app, "GET", "/bounties")[1]) == [created]


def test_update_roundtrip(app):
    created = json.loads(_call(app, "POST", "/bounties", b'{"title":"A","points":1}')[1])
    _call(app, "PATCH", "/bounties/" + created["id"], b'{"title":"B","points":2}')
    fetched = json.loads(_call(app, "GET", "/bounties/" + created["id"])[1])
    assert fetched["title"] == "B"
    assert fetched["points"] == 2


def test_invalid_id_is_server_error(app):
    assert _call(app, "GET", "/bounties/not-a-uuid")[0].startswith("500")


def test_start_rejects_bad_address():
    with pytest.raises(ValueError):
        Server(sqlite3.connect(":memory:")).start("no-port")