# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from fastmcp import FastMCP

from cvkit.cv.basic_info import extract_basic_info
from cvkit.cv.document import SourceDocument
from cvkit.cv.normalize import normalize
from cvkit.cv.parse import parse_file
from cvkit.cv.validate import validate_document
from .error_handler import handle_tool_error

logger = logging.getLogger(__name__)


def parse_cv_file(path: str, mime_type: Optional[str] = None) -> Dict[str, Any]:
    """
    Parse a CV file (PDF, DOC/DOCX, TXT) from disk.
    Returns: { text, basic_info: {name?, email?, phone?}, format, mime_type, size, filename, degraded }
    or an error payload { error, message, context }.
    """
    try:
        return parse_file(path, mime_type).to_dict()
    except Exception as e:
        return handle_tool_error(e, "parse_cv_file")


def validate_cv_file(path: str, mime_type: Optional[str] = None) -> Dict[str, Any]:
    """Check size and type limits for a CV file without parsing it."""
    try:
        result = validate_document(SourceDocument.from_path(path, mime_type))
    except Exception as e:
        return handle_tool_error(e, "validate_cv_file")
    return {
        "is_valid": result.is_valid,
        "error": result.error,
        "errors": [{"error": e.code, "message": str(e)} for e in result.errors],
    }


def extract_cv_basic_info(text: str) -> Dict[str, Any]:
    """Recover name, email and phone from CV text. Missing fields are omitted."""
    return extract_basic_info(normalize(text)).to_dict()


def normalize_cv_text(text: str) -> str:
    """Collapse line endings, blank lines and repeated spaces."""
    return normalize(text)


TOOLS = (parse_cv_file, validate_cv_file, extract_cv_basic_info, normalize_cv_text)


def create_app() -> FastMCP:
    app = FastMCP("cvkit")
    for fn in TOOLS:
        app.tool()(fn)
    logger.debug("Registered %d cvkit tools", len(TOOLS))
    return app
