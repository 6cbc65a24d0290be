# bountysvc

A small HTTP service that keeps a list of bug bounties: each one has an id, a
title, a description and a number of points. It exposes a JSON API as a WSGI
application and stores bounties in a `bounties` table.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Configuration

Two settings are needed. They are read from the environment; a `.env` file in
the working directory is loaded first if it exists. A variable that is already
set in the environment wins over the value in the file.

| Variable       | Meaning                                   |
|----------------|-------------------------------------------|
| `DATABASE_URL` | Where the SQLite database is              |
| `SERVER_PORT`  | Port the HTTP server listens on           |

`bountysvc.config.load_config(*filenames)` does this and returns a `Config`
with `database_url` and `server_port`. Given file names, it loads those files
in turn instead of `.env`, stopping at the first one that does not exist. If
either setting is missing or empty it raises `ConfigError`.

`DATABASE_URL` may be:

- a plain file path, such as `bounties.db`;
- `sqlite:///var/lib/bounties.db` for the file `/var/lib/bounties.db`;
- `sqlite://:memory:` for an in-memory database.

Any other URL scheme is refused.

Example `.env`:

```
DATABASE_URL=bounties.db
SERVER_PORT=8080
```

## Running

```
bountysvc
```

The command loads the configuration, opens the SQLite database, checks that
the connection works and serves the API on the configured port with the
standard library's `wsgiref` server, on all interfaces. Every request is
logged with its method and path. If the configuration is missing, the
database cannot be opened or the server cannot start, the error is logged and
the command exits with status 1.

## API

| Method  | Path             | Body            | Response                      |
|---------|------------------|-----------------|-------------------------------|
| `GET`   | `/bounties`      |                 | `200` with a list of bounties |
| `POST`  | `/bounties`      | bounty as JSON  | `201` with the created bounty |
| `GET`   | `/bounties/{id}` |                 | `200` with one bounty         |
| `PATCH` | `/bounties/{id}` | bounty as JSON  | `200` with the updated bounty |

A bounty looks like this:

```json
{
  "id": "0b7d6c1e-3f4a-4c2b-9d8e-1a2b3c4d5e6f",
  "title": "XSS in search box",
  "description": "Reflected script injection on the results page",
  "points": 500
}
```

- On `POST` the server assigns a fresh UUID as the id, whatever the body says.
- On `PATCH` the id from the path is used, and the title, description and
  points are replaced by those in the body.
- Members missing from the body, or `null`, take their defaults (empty
  strings, `0` points). Member names are matched without regard to case.
- A body that is empty, not valid JSON, not an object, or with a member of
  the wrong type gives `400 Invalid request body`.
- An id that is not a UUID, an id with no row, or a failure in storage gives
  `500` with a short plain-text message.
- An unknown path gives `404`; a known path with the wrong method gives `405`
  with an `Allow` header.

An empty description is stored as `NULL` and read back as an empty string.
Points are stored as a signed 32-bit number and wrap around outside that
range.

## Using it from Python

The service is built from a few layers that can be used on their own:

- `bountysvc.model.Bounty` – the bounty record, with `to_dict()` and
  `Bounty.from_dict(data)`.
- `bountysvc.db.Queries` – the four SQL queries over a DB-API connection,
  returning `DbBounty` rows and taking `CreateBountyParams` and
  `UpdateBountyParams`. It uses `?` placeholders on a `sqlite3` connection
  and `%s` on any other. `get_bounty_by_id` raises `LookupError` when there
  is no such row.
- `bountysvc.mapper` – `to_domain`, `to_db_params` and `to_db_update_params`
  convert between rows and `Bounty` objects.
- `bountysvc.repository.DBRepository` – storage of `Bounty` objects over
  `Queries`.
- `bountysvc.service.Service` – the operations the API offers.
- `bountysvc.handler.Handler` – the WSGI handlers for the four routes,
  wrapped in any middlewares given.
- `bountysvc.middleware.logging_middleware` – logs each request's method and
  path.
- `bountysvc.mux.ServeMux` – the router for `"METHOD /path/{name}"`
  patterns; `path_value(environ, name)` reads a matched wildcard.
- `bountysvc.server.Server` – wires everything together over a connection.
- `bountysvc.main.connect(database_url)` – opens and checks a SQLite
  database.

To serve the application with a WSGI server of your choice:

```python
from bountysvc.config import load_config
from bountysvc.main import connect
from bountysvc.server import Server

config = load_config()
connection = connect(config.database_url)
application = Server(connection).app()
```

`Server(connection).start(":8080")` runs the built-in server on the given
address instead.

## What it does not do

- It does not create the `bounties` table. The database must already have
  one with the columns `id`, `title`, `description` and `points`, for
  example:

  ```sql
  CREATE TABLE bounties (
      id TEXT PRIMARY KEY,
      title TEXT NOT NULL,
      description TEXT,
      points INTEGER NOT NULL
  );
  ```

- The `bountysvc` command and `connect` open SQLite databases only. Another
  database can be used from Python by passing its DB-API connection to
  `Server` or `Queries`.
- There is no route for deleting bounties, and no authentication.