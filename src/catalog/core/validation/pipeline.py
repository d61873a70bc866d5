"""Evaluate field rules against submitted form data."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Any

from pydantic import BaseModel

from src.catalog.core.validation.rules import Check, FieldRule

_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        '"': "&quot;",
        "'": "&#x27;",
        "<": "&lt;",
        ">": "&gt;",
        "/": "&#x2F;",
        "\\": "&#x5C;",
        "`": "&#96;",
    }
)
_ALPHANUMERIC = re.compile(r"^[0-9A-Za-z]+$")


class FieldError(BaseModel):
    """A validation failure tied to one form field."""

    field: str
    message: str
    value: Any = None


@dataclass
class ValidationResult:
    """Sanitized values plus every error found, in rule order."""

    values: dict[str, Any] = field(default_factory=dict)
    errors: list[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, field_name: str, message: str, value: Any = None) -> None:
        self.errors.append(FieldError(field=field_name, message=message, value=value))

    def errors_for(self, field_name: str) -> list[FieldError]:
        return [error for error in self.errors if error.field == field_name]


class _CheckFailed(Exception):
    def __init__(self, message: str, value: Any) -> None:
        super().__init__(message)
        self.message = message
        self.value = value


class _StopChecks(Exception):
    def __init__(self, value: Any) -> None:
        super().__init__()
        self.value = value


def escape_markup(value: str) -> str:
    """Replace markup-significant characters with HTML entities."""
    return value.translate(_ESCAPES)


def normalize_many(value: Any) -> list[Any]:
    """Coerce a multi-valued field to a list.

    Missing -> ``[]``, scalar -> ``[scalar]``, sequence -> list of its
    non-``None`` items in order.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [item for item in value if item is not None]
    return [value]


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        # a single-valued field submitted twice keeps the last value
        return _as_text(value[-1]) if value else ""
    return str(value)


def _parse_iso(value: str, as_type: type) -> date | datetime:
    parsed = datetime.fromisoformat(value)
    if as_type is datetime:
        # stored timestamps are UTC-aware
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)
    return parsed.date()


def _apply(check: Check, value: Any) -> Any:
    op = check.op
    if op == "trim":
        return value.strip() if isinstance(value, str) else value
    if op == "escape":
        return escape_markup(value) if isinstance(value, str) else value
    if op == "optional":
        if not value:
            raise _StopChecks(check.arg)
        return value
    if op == "min_length":
        if len(value) < check.arg:
            raise _CheckFailed(check.message, value)
        return value
    if op == "max_length":
        if len(value) > check.arg:
            raise _CheckFailed(check.message, value)
        return value
    if op == "alphanumeric":
        if not _ALPHANUMERIC.match(value):
            raise _CheckFailed(check.message, value)
        return value
    if op == "iso_date":
        try:
            return _parse_iso(value, check.arg)
        except (TypeError, ValueError):
            raise _CheckFailed(check.message, value) from None
    if op == "choices":
        if value not in check.arg:
            raise _CheckFailed(check.message, value)
        return value
    raise ValueError(f"Unknown check: {op}")


def run_checks(rule: FieldRule, raw: Any) -> tuple[Any, FieldError | None]:
    """Run one value through a rule's checks.

    The first failing check ends the run for this value; its message becomes
    the error and the value reached so far is kept for redisplay.
    """
    value: Any = _as_text(raw)
    for check in rule.checks:
        try:
            value = _apply(check, value)
        except _StopChecks as stop:
            return stop.value, None
        except _CheckFailed as failed:
            return failed.value, FieldError(
                field=rule.field, message=failed.message, value=failed.value
            )
    return value, None


def validate(data: Mapping[str, Any], rules: Sequence[FieldRule]) -> ValidationResult:
    """Apply every rule to ``data`` and collect all errors.

    Fields are independent: a failure in one never stops the others, so the
    caller can report every problem in one response. Multi-valued fields are
    normalized before their checks run.
    """
    result = ValidationResult()
    for rule in rules:
        raw = data.get(rule.field)
        if rule.many:
            items = []
            for item in normalize_many(raw):
                value, error = run_checks(rule, item)
                items.append(value)
                if error is not None:
                    result.errors.append(error)
            result.values[rule.field] = items
            continue

        value, error = run_checks(rule, raw)
        result.values[rule.field] = value
        if error is not None:
            result.errors.append(error)
    return result
