"""Service configuration read from a dotenv file and the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_PORT = "8080"
DEFAULT_MONGO_URI = "mongodb://localhost:27017"
DEFAULT_MONGO_DB_NAME = "go_microservice"


@dataclass(frozen=True)
class Config:
    """Settings the server needs to start."""

    port: str = DEFAULT_PORT
    mongo_uri: str = DEFAULT_MONGO_URI
    mongo_db_name: str = DEFAULT_MONGO_DB_NAME


def get_env(key: str, default: str) -> str:
    """Return the environment variable ``key``, or ``default`` if unset or empty."""
    value = os.environ.get(key, "")
    return value or default


def load_config(env_file: str | os.PathLike[str] = ".env") -> Config:
    """Load ``env_file`` into the environment (without overriding) and build a Config."""
    path = Path(env_file)
    loaded = False
    if path.is_file():
        try:
            load_dotenv(path, override=False)
            loaded = True
        except (OSError, UnicodeDecodeError):
            loaded = False
    if not loaded:
        logger.warning("Error loading .env file, using environment variables")

    return Config(
        port=get_env("PORT", DEFAULT_PORT),
        mongo_uri=get_env("MONGO_URI", DEFAULT_MONGO_URI),
        mongo_db_name=get_env("MONGO_DB_NAME", DEFAULT_MONGO_DB_NAME),
    )