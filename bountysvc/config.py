"""Service configuration from the environment and .env files."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


class ConfigError(Exception):
    """Raised when a required setting is missing."""


@dataclass(frozen=True)
class Config:
    """Settings the service needs to run."""

    database_url: str
    server_port: str


def load_config(*filenames: str) -> Config:
    """Load .env files (default ".env") without overriding the environment, then read settings."""
    for filename in filenames or (".env",):
        if not os.path.isfile(filename):
            break
        load_dotenv(dotenv_path=filename, override=False)

    database_url = os.environ.get("DATABASE_URL", "")
    server_port = os.environ.get("SERVER_PORT", "")
    if not database_url:
        raise ConfigError("DATABASE_URL is not set in environment variables")
    if not server_port:
        raise ConfigError("SERVER_PORT is not set in environment variables")
    return Config(database_url=database_url, server_port=server_port)