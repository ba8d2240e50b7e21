import pytest

from cvkit.cv.document import DOCX_MIME, PDF_MIME, SourceDocument
from cvkit.cv.exceptions import OversizeFileError, UnsupportedTypeError
from cvkit.cv.validate import validate_document

LIMIT = 10 * 1024 * 1024

def test_accepts_allowed_types():
    for mime in (PDF_MIME, DOCX_MIME, "application/msword", "text/plain"):
        assert validate_document(SourceDocument(b"x", mime)).is_valid

def test_limit_is_inclusive():
    assert validate_document(SourceDocument(b"a" * LIMIT, "text/plain")).is_valid

def test_oversize_rejected_regardless_of_type():
    data = b"a" * (LIMIT + 1)
    for mime in ("text/plain", "image/png"):
        result = validate_document(SourceDocument(data, mime))
        assert not result.is_valid
        assert result.has(OversizeFileError)
    assert result.error == "File size must be less than 10MB"

def test_unsupported_rejected_regardless_of_size():
    for data in (b"", b"a" * (LIMIT + 1)):
        result = validate_document(SourceDocument(data, "image/png"))
        assert result.has(UnsupportedTypeError)

def test_unsupported_message():
    result = validate_document(SourceDocument(b"x", "application/zip"))
    assert result.error == "File type not supported. Please upload PDF, DOC, DOCX, or TXT files."
    with pytest.raises(UnsupportedTypeError) as exc:
        result.raise_for_error()
    assert exc.value.mime_type == "application/zip"

def test_custom_limit():
    result = validate_document(SourceDocument(b"abcdef", "text/plain"), max_bytes=5)
    assert result.has(OversizeFileError)
    assert result.error == "File size must be less than 5 bytes"

def test_settings_limit(monkeypatch):
    from cvkit.settings import SETTINGS
    monkeypatch.setattr(SETTINGS, "max_file_bytes", 3)
    assert not validate_document(SourceDocument(b"abcd", "text/plain")).is_valid
