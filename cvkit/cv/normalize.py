from __future__ import annotations
import re

CRLF_RE = re.compile(r"\r\n?")
NEWLINES_RE = re.compile(r"\n{3,}")
MULTISPACES_RE = re.compile(r"[ \t]{2,}")

def normalize(raw: str) -> str:
    """
    Clean decoder output: unify line endings, keep at most one blank line
    between blocks, squeeze runs of spaces, trim. Idempotent.
    """
    txt = CRLF_RE.sub("\n", raw or "")
    txt = NEWLINES_RE.sub("\n\n", txt)
    txt = MULTISPACES_RE.sub(" ", txt)
    return txt.strip()
