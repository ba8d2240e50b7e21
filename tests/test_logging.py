import logging

from cvkit.utils.logging import PIIMask, setup_logger

def _record(msg, *args):
    return logging.LogRecord("cvkit", logging.INFO, __file__, 1, msg, args, None)

def test_masks_email_and_phone():
    rec = _record("Parsed CV for %s (%s)", "jane.doe@example.com", "+62 812-3456-7890")
    assert PIIMask().filter(rec)
    msg = rec.getMessage()
    assert "example.com" not in msg
    assert "3456" not in msg
    assert "jane.doe@***" in msg

def test_plain_messages_untouched():
    rec = _record("Parsed %s document: %d bytes", "pdf", 2048)
    PIIMask().filter(rec)
    assert rec.getMessage() == "Parsed pdf document: 2048 bytes"

def test_setup_logger_single_handler():
    root = setup_logger("debug")
    setup_logger("INFO")
    assert len(root.handlers) == 1
    assert root.level == logging.INFO
    assert any(isinstance(f, PIIMask) for f in root.handlers[0].filters)
