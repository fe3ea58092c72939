"""
Typed outcomes of Deribit API calls.

Every endpoint wrapper returns either an ApiSuccess or an ApiFailure, so
callers branch on ``result.ok`` instead of probing the JSON themselves.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Union


@dataclass(frozen=True)
class ApiSuccess:
    """A response that parsed as a JSON object; for most endpoints it also carries ``result``."""

    body: Dict[str, Any]
    raw: str

    ok = True

    @property
    def result(self) -> Any:
        return self.body.get("result")

    def pretty(self) -> str:
        return json.dumps(self.body, indent=4)


@dataclass(frozen=True)
class ApiFailure:
    """A response without a ``result`` key, or one that is not JSON at all."""

    raw: str
    reason: str

    ok = False

    def pretty(self) -> str:
        return self.raw


ApiResult = Union[ApiSuccess, ApiFailure]



def parse_document(raw: str) -> ApiResult:
    """
    Accept any JSON object, with or without ``result``.

    Read-only queries show the exchange's answer as-is, error envelope
    included; only a body that is not a JSON object is a failure.
    """
    try:
        body = json.loads(raw)
    except ValueError:
        return ApiFailure(raw=raw, reason="response is not valid JSON")

    if not isinstance(body, dict):
        return ApiFailure(raw=raw, reason="response is not a JSON object")

    return ApiSuccess(body=body, raw=raw)


def parse_response(raw: str) -> ApiResult:
    """Classify a raw response body as success or application-level failure."""
    outcome = parse_document(raw)
    if not outcome.ok or "result" in outcome.body:
        return outcome

    error = outcome.body.get("error")
    if isinstance(error, dict) and error.get("message"):
        return ApiFailure(raw=raw, reason=str(error["message"]))
    return ApiFailure(raw=raw, reason="response has no 'result' field")
