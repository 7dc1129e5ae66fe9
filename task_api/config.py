# COMPONENT: RUNTIME CONFIGURATION
# REQUIREMENTS SATISFIED: environment-controlled server, CORS and docs settings
"""
task_api/config.py

Reads runtime settings from environment variables.

Variables are normally loaded from a .env file by task_api/main.py before
this module is consulted. LOG_LEVEL and LOG_FILE are read directly by
task_api/utils/logging.py.

Environment Variables:
    HOST:            bind address for uvicorn (default 0.0.0.0)
    PORT:            listen port (default 3000)
    PUBLIC_URL:      server URL advertised in the OpenAPI document
                     (default http://localhost:<PORT>)
    ALLOWED_ORIGINS: comma separated CORS allowlist (default *)
    REQUEST_LOGGING: 0 disables the request/response logging middleware
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List
import os

DEFAULT_PORT = 3000


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, str(default)))
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    public_url: str
    allowed_origins: List[str]
    request_logging: bool


def get_settings() -> Settings:
    port = _int_env("PORT", DEFAULT_PORT)
    origins = os.environ.get("ALLOWED_ORIGINS", "*")
    return Settings(
        host=os.environ.get("HOST", "0.0.0.0"),
        port=port,
        public_url=os.environ.get("PUBLIC_URL") or f"http://localhost:{port}",
        allowed_origins=[o.strip() for o in origins.split(",") if o.strip()],
        request_logging=_int_env("REQUEST_LOGGING", 1) != 0,
    )
