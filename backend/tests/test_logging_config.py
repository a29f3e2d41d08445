import logging

from phrasegen.logging_config import PassphraseFilter, setup_logging


def make_record(msg: str, *args) -> logging.LogRecord:
    return logging.LogRecord("phrasegen.test", logging.INFO, __file__, 1, msg, args, None)


def test_filter_redacts_passphrase_assignments():
    record = make_record("passphrase=%s", "alpha-BRAVO7charlie_")

    assert PassphraseFilter().filter(record)
    assert record.getMessage() == "[REDACTED - Sensitive data filtered]"


def test_filter_leaves_plain_messages():
    record = make_record("Passphrase batch refreshed (%d lengths)", 7)

    assert PassphraseFilter().filter(record)
    assert record.getMessage() == "Passphrase batch refreshed (7 lengths)"


def test_setup_logging_installs_single_filtered_handler():
    setup_logging("DEBUG")
    setup_logging("WARNING")

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.WARNING
    assert any(isinstance(f, PassphraseFilter) for f in root.handlers[0].filters)
