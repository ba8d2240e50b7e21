# SPDX-License-Identifier: Apache-2.0
"""
Exception to MCP payload mapping for the cvkit tools.

Tools never raise into the MCP transport; failures come back as
{"error": <code>, "message": ..., "context": ...} dicts.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from cvkit.cv.exceptions import CVKitError, OversizeFileError, UnsupportedTypeError

logger = logging.getLogger(__name__)


def convert_exception_to_response(exception: Exception, context: str = "") -> Dict[str, Any]:
    if isinstance(exception, UnsupportedTypeError):
        return {
            "error": exception.code,
            "message": str(exception),
            "mime_type": exception.mime_type,
            "context": context,
        }

    if isinstance(exception, OversizeFileError):
        return {
            "error": exception.code,
            "message": str(exception),
            "size": exception.size,
            "limit": exception.limit,
            "context": context,
        }

    if isinstance(exception, CVKitError):
        return {"error": exception.code, "message": str(exception), "context": context}

    if isinstance(exception, FileNotFoundError):
        return {
            "error": "file_not_found",
            "message": f"No such file: {exception.args[0] if exception.args else ''}",
            "context": context,
        }

    logger.error("Unexpected error in %s: %s", context or "tool", exception, exc_info=True)
    return {"error": "unknown_error", "message": str(exception), "context": context}


def handle_tool_error(exception: Exception, context: str = "") -> Dict[str, Any]:
    return convert_exception_to_response(exception, context)
