from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from cvkit.settings import SETTINGS

from .document import ALLOWED_MIME_TYPES, SourceDocument
from .exceptions import CVKitError, OversizeFileError, UnsupportedTypeError


@dataclass(frozen=True)
class ValidationResult:
    errors: Tuple[CVKitError, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def error(self) -> Optional[str]:
        """Message of the first failed check, as shown to the user."""
        return str(self.errors[0]) if self.errors else None

    def has(self, kind: type) -> bool:
        return any(isinstance(e, kind) for e in self.errors)

    def raise_for_error(self) -> None:
        if self.errors:
            raise self.errors[0]


def validate_document(doc: SourceDocument, *, max_bytes: Optional[int] = None) -> ValidationResult:
    """
    Check an upload against the size limit and the accepted MIME types.
    Both checks always run; the size failure, when present, is reported first.
    """
    limit = SETTINGS.max_file_bytes if max_bytes is None else max_bytes
    errors = []
    if doc.size > limit:
        errors.append(OversizeFileError(doc.size, limit))
    if (doc.mime_type or "").strip().lower() not in ALLOWED_MIME_TYPES:
        errors.append(UnsupportedTypeError(doc.mime_type))
    return ValidationResult(tuple(errors))
