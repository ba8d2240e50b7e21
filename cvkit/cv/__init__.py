from .basic_info import BasicInfo, extract_basic_info
from .document import DocumentFormat, SourceDocument
from .exceptions import CVKitError, DecodeFailureError, OversizeFileError, UnsupportedTypeError
from .normalize import normalize
from .parse import ParsedCV, parse_bytes, parse_cv, parse_document, parse_file
from .validate import ValidationResult, validate_document

__all__ = [
    "BasicInfo",
    "CVKitError",
    "DecodeFailureError",
    "DocumentFormat",
    "OversizeFileError",
    "ParsedCV",
    "SourceDocument",
    "UnsupportedTypeError",
    "ValidationResult",
    "extract_basic_info",
    "normalize",
    "parse_bytes",
    "parse_cv",
    "parse_document",
    "parse_file",
    "validate_document",
]
