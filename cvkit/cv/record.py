from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from cvkit.settings import SETTINGS
from cvkit.utils.dates import epoch_ms, iso_now
from cvkit.utils.files import read_json, write_json

from .parse import ParsedCV

logger = logging.getLogger(__name__)


def build_cv_record(parsed: ParsedCV, user_id: str, *, record_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Shape a parsed upload the way the `cvs` table stores it. Records built here
    are offline until a persistence backend accepts them.
    """
    original_name = parsed.filename or f"cv.{parsed.format.value}"
    return {
        "id": record_id or f"offline_cv_{epoch_ms()}",
        "user_id": user_id,
        "filename": f"offline_{original_name}",
        "original_name": original_name,
        "file_size": parsed.size,
        "mime_type": parsed.mime_type,
        "content": parsed.text,
        "basic_info": parsed.basic_info.to_dict(),
        "analysis": None,
        "uploaded_at": iso_now(),
        "version": 1,
        "is_active": True,
        "offline": True,
        "synced": False,
    }


class OfflineCVStore:
    """JSON-file list of CV records kept while the hosted database is unavailable."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path or SETTINGS.store_path)

    def load(self) -> List[Dict[str, Any]]:
        try:
            data = read_json(self.path, default=[])
        except ValueError as e:
            logger.warning("Offline CV store %s is unreadable (%s); starting empty.", self.path, e)
            return []
        return data if isinstance(data, list) else []

    def save(self, record: Dict[str, Any]) -> str:
        records = self.load()
        saved = {**record, "synced": False}
        if not saved.get("id"):
            saved["id"] = f"local_cv_{epoch_ms()}"
        records.append(saved)
        write_json(self.path, records)
        logger.info("Saved CV record %s to %s", saved["id"], self.path)
        return saved["id"]

    def get(self, record_id: str) -> Optional[Dict[str, Any]]:
        for r in self.load():
            if r.get("id") == record_id:
                return r
        return None

    def for_user(self, user_id: str) -> List[Dict[str, Any]]:
        rows = [r for r in self.load() if r.get("user_id") == user_id]
        return sorted(rows, key=lambda r: r.get("uploaded_at") or "", reverse=True)
