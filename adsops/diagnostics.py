"""Turn Google Ads failures into something a human can act on.

The SDK raises ``GoogleAdsException`` carrying a gRPC status (``.error``)
and a ``GoogleAdsFailure`` proto (``.failure``) with per-item errors. Other
failures (transport, auth library) are plain exceptions. Everything here is
duck-typed so both kinds are handled without importing the SDK.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Callable, List, Optional


@dataclass(frozen=True)
class HintRule:
    name: str
    predicate: Callable[[str], bool]
    title: str
    lines: List[str]


def _contains(needle: str) -> Callable[[str], bool]:
    return lambda message: needle in message


# Evaluated top to bottom; the first match wins.
HINT_RULES: List[HintRule] = [
    HintRule(
        name="permission_denied",
        predicate=_contains("PERMISSION_DENIED"),
        title="Permission Denied",
        lines=[
            "Your developer token might still be pending approval",
            "The account ID might be incorrect",
            "The refresh token might be invalid",
        ],
    ),
    HintRule(
        name="unauthenticated",
        predicate=_contains("UNAUTHENTICATED"),
        title="Authentication Failed",
        lines=[
            "Check your refresh token is valid",
            "Verify client ID and secret match",
            "Make sure the token hasn't expired",
        ],
    ),
    HintRule(
        name="invalid_customer_id",
        predicate=_contains("INVALID_CUSTOMER_ID"),
        title="Invalid Customer ID",
        lines=[
            "Check the customer ID in your .env file",
            "Make sure it's just numbers (no dashes)",
            "Verify you have access to this account",
        ],
    ),
    HintRule(
        name="developer_token",
        predicate=_contains("DEVELOPER_TOKEN"),
        title="Developer Token Issue",
        lines=[
            "Your token might not be approved yet",
            "Check for typos in the token",
            "Token might be for wrong environment (test vs production)",
        ],
    ),
]


def select_hint(message: str, rules: Optional[List[HintRule]] = None) -> Optional[HintRule]:
    for rule in HINT_RULES if rules is None else rules:
        if rule.predicate(message):
            return rule
    return None


def format_hint(rule: HintRule) -> List[str]:
    out = [f"⚠️  {rule.title}:"]
    out.extend(f"{i}. {line}" for i, line in enumerate(rule.lines, start=1))
    return out


def _status_name(exc: BaseException) -> str:
    """gRPC status name (e.g. PERMISSION_DENIED) when the exception carries one."""
    call = getattr(exc, "error", None)
    code_fn = getattr(call, "code", None)
    if not callable(code_fn):
        return ""
    try:
        code = code_fn()
    except Exception:
        return ""
    return str(getattr(code, "name", "") or "")


def _failure_errors(exc: BaseException) -> list:
    failure = getattr(exc, "failure", None)
    errors = getattr(failure, "errors", None)
    if errors is None:
        errors = getattr(exc, "errors", None)
    if errors is None or isinstance(errors, (str, bytes)):
        return []
    try:
        return list(errors)
    except TypeError:
        return []


def _error_code_text(err) -> str:
    code = getattr(err, "error_code", None)
    if code is None:
        return ""
    # proto text format: only the populated oneof field is printed
    return " ".join(str(code).split())


def nested_errors(exc: BaseException) -> List[str]:
    out = []
    for err in _failure_errors(exc):
        out.append(str(getattr(err, "message", "") or err))
    return out


def error_message(exc: BaseException) -> str:
    """Best-effort single string used for hint matching."""
    parts = []
    text = str(exc).strip()
    if text:
        parts.append(text)
    status = _status_name(exc)
    if status and status not in text:
        parts.append(status)
    for err in _failure_errors(exc):
        code = _error_code_text(err)
        if code:
            parts.append(code)
    if not parts:
        return type(exc).__name__ or "Unknown error"
    return " | ".join(parts)


def error_payload(exc: BaseException) -> dict:
    payload = {
        "type": type(exc).__name__,
        "message": str(exc),
    }
    status = _status_name(exc)
    if status:
        payload["status"] = status
    request_id = getattr(exc, "request_id", None)
    if request_id:
        payload["request_id"] = request_id
    errors = _failure_errors(exc)
    if errors:
        payload["errors"] = [
            {
                "error_code": _error_code_text(e),
                "message": str(getattr(e, "message", "") or e),
            }
            for e in errors
        ]
    return payload


def format_error_payload(exc: BaseException) -> str:
    return json.dumps(error_payload(exc), indent=2, default=str)


def mask(value: Optional[str], keep: int) -> str:
    """Prefix of *value* followed by '...' (debug output only)."""
    return f"{(value or '')[:keep]}..."
