# src/graph_tasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing connects or requires secrets at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "GRAPH_TASKS"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _split_addr(addr: str, default_host: str, default_port: int) -> tuple[str, int]:
    """Parse "host:port" (port optional)."""
    host, sep, port = addr.strip().rpartition(":")
    if not sep:
        return addr.strip() or default_host, default_port
    try:
        return host or default_host, int(port)
    except ValueError:
        return host or default_host, default_port


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Graph backend ----
    graph_host: str
    graph_port: int
    graph_password: str
    graph_name: str
    query_timeout_ms: int
    socket_timeout: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "graph-tasks")
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/graph-tasks"))

        graph_host = _env(_k("HOST"), "127.0.0.1").strip()
        graph_port = _env_int(_k("PORT"), 6379)
        # GRAPH_TASKS_ADDR=host:port wins over the separate variables.
        addr = _env(_k("ADDR")).strip()
        if addr:
            graph_host, graph_port = _split_addr(addr, graph_host, graph_port)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            graph_host=graph_host,
            graph_port=graph_port,
            graph_password=_env(_k("PASSWORD")).strip(),
            graph_name=_env(_k("GRAPH"), "tasks").strip() or "tasks",
            query_timeout_ms=max(0, _env_int(_k("QUERY_TIMEOUT_MS"), 5000)),
            socket_timeout=max(0.0, _env_float(_k("SOCKET_TIMEOUT"), 10.0)),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(override=False)
    return Settings.from_env()
