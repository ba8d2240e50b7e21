from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .basic_info import BasicInfo, extract_basic_info
from .document import DocumentFormat, SourceDocument
from .extractors import EXTRACTORS, pdf_placeholder
from .normalize import normalize
from .validate import validate_document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedCV:
    text: str
    basic_info: BasicInfo
    format: DocumentFormat
    mime_type: str
    size: int
    filename: Optional[str] = None
    # PDF decoder failed and `text` is the placeholder
    degraded: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "basic_info": self.basic_info.to_dict(),
            "format": self.format.value,
            "mime_type": self.mime_type,
            "size": self.size,
            "filename": self.filename,
            "degraded": self.degraded,
        }


def parse_document(doc: SourceDocument) -> ParsedCV:
    validate_document(doc).raise_for_error()
    fmt = DocumentFormat.from_mime(doc.mime_type)
    extractor = EXTRACTORS[fmt]
    text = normalize(extractor.decode(doc.data))
    degraded = extractor.degrades and text == pdf_placeholder(doc.size)
    logger.debug("Parsed %s document: %d bytes -> %d chars", fmt.value, doc.size, len(text))
    return ParsedCV(
        text=text,
        basic_info=extract_basic_info(text),
        format=fmt,
        mime_type=doc.mime_type,
        size=doc.size,
        filename=doc.filename,
        degraded=degraded,
    )


def parse_bytes(data: bytes, mime_type: str, filename: Optional[str] = None) -> ParsedCV:
    return parse_document(SourceDocument(data=data, mime_type=mime_type, filename=filename))


def parse_file(path: str | Path, mime_type: Optional[str] = None) -> ParsedCV:
    return parse_document(SourceDocument.from_path(path, mime_type))


def parse_cv(path: str | Path) -> Dict[str, Any]:
    parsed = parse_file(path)
    info = parsed.basic_info
    return {
        "name": info.name,
        "email": info.email,
        "phone": info.phone,
        "raw": parsed.text,
        "format": parsed.format.value,
        "degraded": parsed.degraded,
        "source_path": str(path),
    }
