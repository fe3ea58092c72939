"""
Logging Configuration Module for the Deribit Trading Client.

Every module imports its logger from here. Log records go to both the
console (INFO and above) and a log file (DEBUG and above) so that each
request and response can be reviewed after a session.

Credentials never reach either destination: every logger carries a
RedactingFilter that masks the client secret, access and refresh tokens
and bearer headers, whether they appear in a query string or a JSON body.

Usage in other modules:
    from src.logger_setup import setup_logger
    logger = setup_logger(__name__)
    logger.info("Order placed")
    logger.error("Request failed")
"""

import logging
import re
import sys

from src.config import LOG_FILE, LOG_FORMAT, LOG_DATE_FORMAT

SECRET_KEYS = ("client_secret", "access_token", "refresh_token")
MASK = "****"

_KEYS = "|".join(SECRET_KEYS)
_JSON_SECRET = re.compile(r'("(?:%s)"\s*:\s*")[^"]*(")' % _KEYS)
_QUERY_SECRET = re.compile(r"((?:%s)=)[^&\s'\"]+" % _KEYS)
_BEARER = re.compile(r"(Bearer\s+)[^\s'\"]+")


def redact(text: str) -> str:
    """
    Mask credential values in free text.

    Example:
        >>> redact("/public/auth?client_id=abc&client_secret=xyz")
        '/public/auth?client_id=abc&client_secret=****'
    """
    text = _JSON_SECRET.sub(r"\g<1>%s\g<2>" % MASK, text)
    text = _QUERY_SECRET.sub(r"\g<1>%s" % MASK, text)
    return _BEARER.sub(r"\g<1>%s" % MASK, text)


class RedactingFilter(logging.Filter):
    """Rewrite each record's message with credentials masked."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = redact(record.getMessage())
        record.args = None
        return True


def setup_logger(name: str) -> logging.Logger:
    """
    Create and configure a logger with console and file handlers.

    Args:
        name: The name for the logger, typically __name__ of the calling module.
              This appears in log messages to identify which module generated them.

    Returns:
        A configured logging.Logger instance ready for use.

    Example:
        >>> logger = setup_logger("src.client")
        >>> logger.info("Fetching order book for BTC-PERPETUAL")
        2024-01-15 10:30:00 - src.client - INFO - Fetching order book for BTC-PERPETUAL
    """
    logger = logging.getLogger(name)

    # Only add handlers if the logger doesn't already have them, so repeated
    # imports of the same module don't duplicate every line.
    if not logger.handlers:
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        # On the logger, not the handlers: applies to every destination.
        logger.addFilter(RedactingFilter())

        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        # Console: INFO and above, for following a session live
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)

        # File: DEBUG and above, includes every request URL and response body
        file_handler = logging.FileHandler(LOG_FILE, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)

        logger.addHandler(console_handler)
        logger.addHandler(file_handler)

    return logger


if __name__ == "__main__":
    test_logger = setup_logger("logger_test")
    test_logger.debug("DEBUG message — only visible in the log file")
    test_logger.info("INFO message — visible in console and log file")
    test_logger.info('Masked: {"access_token":"abc"} client_secret=xyz Bearer abc')
    print(f"\n✅ Logger test complete. Check '{LOG_FILE}' for full output.")
