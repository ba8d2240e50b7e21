import pytest

from cvkit.cv.document import DOC_MIME, DOCX_MIME, PDF_MIME, DocumentFormat, SourceDocument
from cvkit.cv.exceptions import DecodeFailureError, OversizeFileError, UnsupportedTypeError
from cvkit.cv.parse import parse_bytes, parse_cv, parse_document, parse_file

SAMPLE = "Jane Doe\r\njane.doe@example.com\r\n+62 812-3456-7890\r\n\r\n\r\n\r\nSKILLS    Python,  SQL"

def test_text_document():
    parsed = parse_bytes(SAMPLE.encode("utf-8"), "text/plain", filename="jane.txt")
    assert parsed.format is DocumentFormat.TEXT
    assert parsed.text == "Jane Doe\njane.doe@example.com\n+62 812-3456-7890\n\nSKILLS Python, SQL"
    assert parsed.basic_info.name == "Jane Doe"
    assert parsed.basic_info.email == "jane.doe@example.com"
    assert parsed.basic_info.phone == "+62 812-3456-7890"
    assert parsed.size == len(SAMPLE.encode("utf-8"))
    assert not parsed.degraded

def test_docx_document(make_docx):
    data = make_docx(["Budi Santoso", "budi@example.co.id", "0812-3456-7890"])
    parsed = parse_bytes(data, DOCX_MIME)
    assert parsed.format is DocumentFormat.WORD
    assert parsed.basic_info.to_dict() == {
        "email": "budi@example.co.id",
        "phone": "0812-3456-7890",
        "name": "Budi Santoso",
    }

def test_pdf_document(make_pdf):
    parsed = parse_bytes(make_pdf(["Jane Doe", "jane.doe@example.com"]), PDF_MIME)
    assert parsed.format is DocumentFormat.PDF
    assert parsed.basic_info.email == "jane.doe@example.com"
    assert not parsed.degraded

def test_corrupted_pdf_degrades():
    data = b"garbage bytes"
    parsed = parse_bytes(data, PDF_MIME)
    assert parsed.degraded
    assert str(len(data)) in parsed.text
    assert parsed.basic_info.to_dict() == {}

def test_corrupted_word_fails():
    for mime in (DOCX_MIME, DOC_MIME):
        with pytest.raises(DecodeFailureError):
            parse_bytes(b"garbage bytes", mime)

def test_validation_runs_before_decoding(monkeypatch):
    from cvkit.cv import extractors

    def never(data):
        raise AssertionError("decoder must not run")

    monkeypatch.setitem(extractors.EXTRACTORS, DocumentFormat.TEXT, extractors.Extractor(never))
    with pytest.raises(OversizeFileError):
        parse_document(SourceDocument(b"a" * (10 * 1024 * 1024 + 1), "text/plain"))

def test_unsupported_type():
    with pytest.raises(UnsupportedTypeError):
        parse_bytes(b"GIF89a", "image/gif")

def test_parse_file_guesses_mime(tmp_path):
    p = tmp_path / "cv.txt"
    p.write_text("Siti Rahma\nsiti@example.com\n", encoding="utf-8")
    parsed = parse_file(p)
    assert parsed.mime_type == "text/plain"
    assert parsed.filename == "cv.txt"
    assert parsed.basic_info.name == "Siti Rahma"

def test_parse_file_unknown_extension(tmp_path):
    p = tmp_path / "cv.rtf"
    p.write_text("{\\rtf1 hello}", encoding="utf-8")
    with pytest.raises(UnsupportedTypeError):
        parse_file(p)

def test_parse_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_file(tmp_path / "nope.pdf")

def test_parse_cv_dict(tmp_path):
    p = tmp_path / "cv.txt"
    p.write_text(SAMPLE, encoding="utf-8")
    cv = parse_cv(p)
    assert cv["name"] == "Jane Doe"
    assert cv["format"] == "text"
    assert cv["source_path"] == str(p)
    assert cv["raw"].startswith("Jane Doe")
