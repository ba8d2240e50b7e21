from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv
load_dotenv()  # load .env early


def _env_int(name: str, default: int) -> int:
    try:
        return int((os.getenv(name, "") or str(default)).strip())
    except Exception:
        return default


def _env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    v = v.strip().lower()
    return v in {"1", "true", "yes", "on", "y", "t"}


@dataclass
class _Settings:
    # Upload limits (10 MiB)
    max_file_bytes: int = field(
        default_factory=lambda: _env_int("CVKIT_MAX_FILE_BYTES", 10 * 1024 * 1024)
    )

    # Offline store used when the hosted database is unreachable
    store_path: str = field(default_factory=lambda: os.getenv("CVKIT_STORE_PATH", "data/cvs.json"))

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    log_json: bool = field(default_factory=lambda: _env_bool("LOG_JSON", False))


SETTINGS = _Settings()
