"""
HTTP transport helper for the Deribit REST API.

Deribit accepts every call, including state-changing ones, as a GET with
query-string parameters and reports application errors inside the JSON
body. This module therefore performs one GET per call and hands back the
body text whatever the HTTP status; only network/TLS failures are raised.
"""

from typing import Any, Dict, Optional

import requests

from src.config import REQUEST_TIMEOUT
from src.logger_setup import MASK, SECRET_KEYS, redact, setup_logger

logger = setup_logger(__name__)


class TransportError(Exception):
    """Raised when the HTTP request itself fails (DNS, TLS, connection reset...)."""


def _loggable(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    if not params:
        return {}
    return {
        key: (MASK if key in SECRET_KEYS else value)
        for key, value in params.items()
    }


def http_get(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: Optional[float] = REQUEST_TIMEOUT,
) -> str:
    """
    Perform a single blocking GET request and return the response body.

    Args:
        url:     Full endpoint URL.
        params:  Query-string parameters.
        headers: Extra header lines, e.g. the Authorization header.
        timeout: Seconds to wait; None waits indefinitely.

    Returns:
        The full response body as text.

    Raises:
        TransportError: If the request could not be completed.
    """
    logger.debug(f"GET {url} params={_loggable(params)}")
    try:
        response = requests.get(url, params=params, headers=headers or {}, timeout=timeout)
    except requests.RequestException as e:
        # requests puts the full query string, secrets included, in its message
        detail = redact(f"{type(e).__name__}: {e}")
        logger.error(f"HTTP request to {url} failed: {detail}")
        raise TransportError(detail) from e

    logger.debug(f"Response {response.status_code} from {url}: {response.text}")
    return response.text
