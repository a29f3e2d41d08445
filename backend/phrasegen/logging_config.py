"""
Logging configuration
Generation events are logged but never include passphrase values
"""

import logging
import sys
from typing import Set


class PassphraseFilter(logging.Filter):
    """Filter that redacts records which look like they carry a passphrase"""

    SENSITIVE_KEYS: Set[str] = {
        "passphrase",
        "password",
        "mnemonic",
        "words",
        "secret",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        if hasattr(record, "msg"):
            msg = str(record.msg).lower()
            for key in self.SENSITIVE_KEYS:
                if key in msg and "=" in str(record.msg):
                    # Likely contains a value assignment
                    record.msg = "[REDACTED - Sensitive data filtered]"
                    record.args = ()
                    break
        return True


def setup_logging(level: str = "INFO"):
    """Configure application logging"""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(PassphraseFilter())

    root = logging.getLogger()
    root.setLevel(level.upper())

    # Clear existing handlers to avoid duplicates
    root.handlers = []
    root.addHandler(handler)

    # Reduce noise from libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# Service event logger
event_logger = logging.getLogger("phrasegen.events")


def log_batch_refreshed(count: int):
    """Log a full batch regeneration"""
    event_logger.info(f"Passphrase batch refreshed ({count} lengths)")


def log_unknown_length(length: int):
    """Log a lookup for a length outside the batch"""
    event_logger.info(f"No batch entry for length {length}")


def log_rate_limited(ip: str):
    """Log rate limit event"""
    event_logger.warning(f"Rate limit exceeded for {ip}")
