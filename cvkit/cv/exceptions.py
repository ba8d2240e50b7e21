# cvkit/cv/exceptions.py
"""
Exceptions raised by the CV parsing pipeline.

- Validation failures (unsupported MIME type, oversize upload) are raised
  before any decoder runs.
- Decode failures are raised by the Word and plain-text extractors. The PDF
  extractor absorbs its decoder errors into a placeholder text instead.

Each class carries a stable ``code`` used in CLI output and MCP payloads.
"""

from __future__ import annotations

from typing import Optional


class CVKitError(Exception):
    """Base exception for cvkit."""
    code = "cvkit_error"


class UnsupportedTypeError(CVKitError):
    """Declared MIME type is not one of the accepted CV formats."""
    code = "unsupported_type"

    def __init__(self, mime_type: Optional[str], message: Optional[str] = None):
        super().__init__(
            message
            or "File type not supported. Please upload PDF, DOC, DOCX, or TXT files."
        )
        self.mime_type = mime_type


def _human_size(n: int) -> str:
    if n >= 1024 * 1024:
        return f"{n // (1024 * 1024)}MB"
    return f"{n} bytes"


class OversizeFileError(CVKitError):
    """Upload exceeds the configured size limit."""
    code = "oversize_file"

    def __init__(self, size: int, limit: int, message: Optional[str] = None):
        super().__init__(message or f"File size must be less than {_human_size(limit)}")
        self.size = size
        self.limit = limit


class DecodeFailureError(CVKitError):
    """A decoder could not turn the document bytes into text."""
    code = "decode_failure"

    def __init__(self, format: str, message: str):
        super().__init__(message)
        self.format = format


__all__ = [
    "CVKitError",
    "UnsupportedTypeError",
    "OversizeFileError",
    "DecodeFailureError",
]
