from __future__ import annotations
import logging
import re

# CV text is personal data: never print contact details verbatim.
EMAIL_RE = re.compile(r"([A-Za-z0-9._%+-]+)@([A-Za-z0-9.-]+\.[A-Za-z]{2,})")
PHONE_RE = re.compile(r"(\+?\d{2,3})[\s-]?\d{2,4}[\s-]?\d{3,4}[\s-]?\d{3,4}")

def _mask(text: str) -> str:
    text = EMAIL_RE.sub(r"\1@***", text)
    return PHONE_RE.sub(r"\1***", text)

class PIIMask(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = _mask(record.msg)
        if record.args:
            if isinstance(record.args, tuple):
                args = []
                for a in record.args:
                    if isinstance(a, str):
                        a = _mask(a)
                    args.append(a)
                record.args = tuple(args)
        return True

def setup_logger(level: str = "INFO", json_mode: bool = False) -> logging.Logger:
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    # clear handlers
    for h in list(logger.handlers):
        logger.removeHandler(h)

    h = logging.StreamHandler()
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    if json_mode:
        fmt = '{"ts":"%(asctime)s","lvl":"%(levelname)s","logger":"%(name)s","msg":"%(message)s"}'
    f = logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S")
    h.setFormatter(f)
    h.addFilter(PIIMask())
    logger.addHandler(h)

    # pdfminer is chatty about malformed streams at INFO/DEBUG
    logging.getLogger("pdfminer").setLevel(logging.WARNING)
    return logger
