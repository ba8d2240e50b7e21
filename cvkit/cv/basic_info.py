from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Optional

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
# Indonesian numbers: +62 / 62 / 0 prefix, then 2-3, 3-4, 3-4 digit groups
PHONE_RE = re.compile(r"(?:\+62|62|0)[ -]?\d{2,3}[ -]?\d{3,4}[ -]?\d{3,4}")
NAME_WORD_RE = re.compile(r"^[A-Za-z\s.]+$")
LEADING_DIGIT_RE = re.compile(r"^\d")

HEADER_MARKERS = ("CV", "CURRICULUM", "RESUME")
NAME_SCAN_LINES = 5


@dataclass(frozen=True)
class BasicInfo:
    email: Optional[str] = None
    phone: Optional[str] = None
    name: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        return {k: v for k, v in (("email", self.email), ("phone", self.phone), ("name", self.name)) if v}


def extract_email(text: str) -> Optional[str]:
    m = EMAIL_RE.search(text or "")
    return m.group(0) if m else None


def extract_phone(text: str) -> Optional[str]:
    m = PHONE_RE.search(text or "")
    return m.group(0) if m else None


def _skip_name_line(line: str) -> bool:
    # contact details, document titles, dates/addresses
    if "@" in line or any(marker in line for marker in HEADER_MARKERS):
        return True
    return bool(LEADING_DIGIT_RE.match(line)) or len(line) < 3


def extract_name(text: str) -> Optional[str]:
    """First of the top non-empty lines that reads like a 2-4 word name."""
    lines: List[str] = [l.strip() for l in (text or "").split("\n") if l.strip()]
    for line in lines[:NAME_SCAN_LINES]:
        if _skip_name_line(line):
            continue
        words = [w for w in line.split(" ") if w]
        if 2 <= len(words) <= 4 and all(NAME_WORD_RE.match(w) for w in words):
            return line
    return None


def extract_basic_info(text: str) -> BasicInfo:
    return BasicInfo(
        email=extract_email(text),
        phone=extract_phone(text),
        name=extract_name(text),
    )
