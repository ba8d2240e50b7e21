from __future__ import annotations
from datetime import datetime, timezone

def iso_now() -> str:
    return datetime.now(timezone.utc).isoformat()

def epoch_ms() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)
