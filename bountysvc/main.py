"""Command entry point of the bounty service."""

from __future__ import annotations

import logging
import sqlite3
from urllib.parse import urlsplit

from bountysvc.config import ConfigError, load_config
from bountysvc.server import Server

logger = logging.getLogger(__name__)


def connect(database_url: str) -> sqlite3.Connection:
    """Open and ping a database given as "sqlite:///path", "sqlite://:memory:" or a plain path."""
    if "://" in database_url:
        parts = urlsplit(database_url)
        if parts.scheme != "sqlite":
            raise ValueError(f"unsupported database scheme {parts.scheme!r}")
        target = (parts.netloc + parts.path) if parts.netloc else parts.path
        if target.startswith("/") and not parts.netloc:
            target = target[1:] if target.startswith("//") else target
        target = target or ":memory:"
    else:
        target = database_url
    connection = sqlite3.connect(target, check_same_thread=False)
    try:
        connection.execute("SELECT 1").fetchone()
    except sqlite3.Error:
        connection.close()
        raise
    return connection


def main(argv=None) -> int:
    """Load configuration, connect to the database and serve until stopped."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    try:
        config = load_config()
    except ConfigError as exc:
        logger.error("Failed to load configuration: %s", exc)
        return 1
    try:
        connection = connect(config.database_url)
    except (ValueError, sqlite3.Error) as exc:
        logger.error("Failed to connect to database: %s", exc)
        return 1
    logger.info("Successfully connected to the database!")
    try:
        Server(connection).start(":" + config.server_port)
    except (OSError, ValueError) as exc:
        logger.error("Failed to start server: %s", exc)
        return 1
    except KeyboardInterrupt:
        return 0
    finally:
        connection.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())