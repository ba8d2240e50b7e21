from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Optional

from .exceptions import UnsupportedTypeError

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_MIME = "application/msword"
TEXT_MIME = "text/plain"


class DocumentFormat(str, Enum):
    """Document families accepted as CV uploads."""
    PDF = "pdf"
    WORD = "word"
    TEXT = "text"

    @classmethod
    def from_mime(cls, mime_type: Optional[str]) -> "DocumentFormat":
        fmt = MIME_FORMATS.get((mime_type or "").strip().lower())
        if fmt is None:
            raise UnsupportedTypeError(mime_type)
        return fmt


MIME_FORMATS: Dict[str, DocumentFormat] = {
    PDF_MIME: DocumentFormat.PDF,
    DOCX_MIME: DocumentFormat.WORD,
    DOC_MIME: DocumentFormat.WORD,
    TEXT_MIME: DocumentFormat.TEXT,
}

ALLOWED_MIME_TYPES = frozenset(MIME_FORMATS)

# mimetypes has no entry for .docx on some platforms
_SUFFIX_MIME = {
    ".pdf": PDF_MIME,
    ".docx": DOCX_MIME,
    ".doc": DOC_MIME,
    ".txt": TEXT_MIME,
}


def guess_mime_type(path: str | Path) -> str:
    """Best-effort MIME type from a file name; empty string when unknown."""
    suffix = Path(path).suffix.lower()
    if suffix in _SUFFIX_MIME:
        return _SUFFIX_MIME[suffix]
    guessed, _ = mimetypes.guess_type(str(path))
    return guessed or ""


@dataclass(frozen=True)
class SourceDocument:
    """An uploaded CV as received: bytes plus the declared MIME type."""
    data: bytes
    mime_type: str
    filename: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.data)

    @classmethod
    def from_path(cls, path: str | Path, mime_type: Optional[str] = None) -> "SourceDocument":
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(p)
        return cls(
            data=p.read_bytes(),
            mime_type=mime_type if mime_type is not None else guess_mime_type(p),
            filename=p.name,
        )
