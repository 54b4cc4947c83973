"""
agorava_core.api.preconditions

Guard functions for checking arguments and invariants.

Responsibilities:
- Reject missing values, blank strings and malformed URLs with `InvalidArgumentError`.
- Accept the OAuth out-of-band token wherever a callback URL is expected.

Every check returns `None` on success; callers cannot proceed past a failed check.
"""

from __future__ import annotations

import re
from typing import Any

from agorava_core.constants import DEFAULT_VALIDATION_MESSAGE, OUT_OF_BAND
from agorava_core.observability.logging import get_logger

log = get_logger(__name__)

# scheme = alpha *( alpha | digit | "+" | "-" | "." )
# re.ASCII: a non-breaking space inside the body is not a terminator.
_URL_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9+.-]*://\S+", re.ASCII)


class InvalidArgumentError(ValueError):
    """
    Raised when a precondition does not hold. `message` is the resolved message.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def check_not_null(value: Any, message: str | None = None) -> None:
    _check(value is not None, message)


def check_empty_string(value: str | None, message: str | None = None) -> None:
    """
    Fail if `value` is None or contains only whitespace.
    """

    _check(value is not None and value.strip() != "", message)


def check_valid_url(value: str | None, message: str | None = None) -> None:
    check_empty_string(value, message)
    _check(is_url(value), message)


def check_valid_oauth_callback(value: str | None, message: str | None = None) -> None:
    """
    Like `check_valid_url`, but the out-of-band token (any case) is accepted as-is.
    """

    check_empty_string(value, message)
    if value.lower() != OUT_OF_BAND.lower():
        _check(is_url(value), message)


def is_url(value: str | None) -> bool:
    return value is not None and _URL_PATTERN.fullmatch(value) is not None


def _resolve_message(message: str | None) -> str:
    if message is None or not message.strip():
        return DEFAULT_VALIDATION_MESSAGE
    return message


def _check(requirement: bool, message: str | None) -> None:
    if requirement:
        return
    resolved = _resolve_message(message)
    log.debug("precondition_failed", message=resolved)
    raise InvalidArgumentError(resolved)


# --- Module Notes -----------------------------------------------------------
# The pattern is compiled once at import; matching is reentrant so no locking is needed.
