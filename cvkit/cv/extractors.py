# cvkit/cv/extractors.py
"""
Format-specific decoders: bytes in, raw (un-normalized) text out.

Failure policy differs per format:
- PDF: decoder errors are logged and replaced by a placeholder that records
  the byte length, so an upload still produces a (degraded) result.
- Word / plain text: decoder errors raise DecodeFailureError.

The PDF/Word asymmetry is a per-format flag (Extractor.degrades); revisit
before unifying it.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List

from .document import DocumentFormat
from .exceptions import DecodeFailureError

logger = logging.getLogger(__name__)


def pdf_placeholder(size: int) -> str:
    return f"PDF file uploaded: {size} bytes. Content parsing failed."


def extract_pdf(data: bytes) -> str:
    try:
        from pdfminer.high_level import extract_text as pdf_extract
        text = pdf_extract(io.BytesIO(data))
    except Exception as e:
        logger.warning("PDF parsing error (%d bytes): %s", len(data), e)
        return pdf_placeholder(len(data))
    # pdfminer ends each page with a form feed
    return text.replace("\x0c", "\n\n")


def extract_word(data: bytes) -> str:
    try:
        from docx import Document
        doc = Document(io.BytesIO(data))
        parts: List[str] = [paragraph.text for paragraph in doc.paragraphs]
        for table in doc.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if cells:
                    parts.append(" ".join(cells))
    except Exception as e:
        logger.error("Word parsing error (%d bytes): %s", len(data), e)
        raise DecodeFailureError(DocumentFormat.WORD.value, "Failed to parse Word document") from e
    return "\n".join(parts)


def extract_plain_text(data: bytes) -> str:
    try:
        # utf-8-sig drops a leading BOM if present
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        logger.error("Text parsing error: %s", e)
        raise DecodeFailureError(DocumentFormat.TEXT.value, "Failed to parse text file") from e


@dataclass(frozen=True)
class Extractor:
    decode: Callable[[bytes], str]
    # True when decoder failures are absorbed into a placeholder instead of raised
    degrades: bool = False


EXTRACTORS: Dict[DocumentFormat, Extractor] = {
    DocumentFormat.PDF: Extractor(extract_pdf, degrades=True),
    DocumentFormat.WORD: Extractor(extract_word),
    DocumentFormat.TEXT: Extractor(extract_plain_text),
}


def extract_raw_text(fmt: DocumentFormat, data: bytes) -> str:
    return EXTRACTORS[fmt].decode(data)
