from __future__ import annotations

from datetime import datetime
from typing import Any


class DomainRuleViolation(Exception):
    """Raise to map to HTTP 409 (domain rule violation)."""


class ValidationError(Exception):
    """Raise to map to HTTP 422 (validation error)."""


def is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def is_aware_datetime(value: Any) -> bool:
    return isinstance(value, datetime) and value.tzinfo is not None and value.utcoffset() is not None
