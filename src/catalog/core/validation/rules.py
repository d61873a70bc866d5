"""Declarative field rules.

A ``FieldRule`` names a form field and the ordered checks applied to it.
Checks are plain records; ``pipeline.validate`` interprets them. Sanitizers
(``trim``, ``escape``) rewrite the value, validators (``min_length``,
``iso_date``...) report the check's message when the value fails, and
``optional`` ends processing early for empty values.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Literal

CheckOp = Literal[
    "trim",
    "escape",
    "optional",
    "min_length",
    "max_length",
    "alphanumeric",
    "iso_date",
    "choices",
]


@dataclass(frozen=True)
class Check:
    op: CheckOp
    message: str = "Invalid value"
    arg: Any = None


@dataclass(frozen=True)
class FieldRule:
    """Checks for one field.

    ``many`` marks a multi-valued field: the submitted value is normalized to
    a list first and every item goes through the checks.
    """

    field: str
    checks: tuple[Check, ...] = ()
    many: bool = False


def rule(name: str, *checks: Check, many: bool = False) -> FieldRule:
    return FieldRule(field=name, checks=tuple(checks), many=many)


def trim() -> Check:
    return Check("trim")


def escape() -> Check:
    return Check("escape")


def optional(default: Any = None) -> Check:
    """Stop checking when the value is empty, storing ``default`` instead."""
    return Check("optional", arg=default)


def min_length(length: int, message: str) -> Check:
    return Check("min_length", message, length)


def max_length(length: int, message: str) -> Check:
    return Check("max_length", message, length)


def alphanumeric(message: str) -> Check:
    return Check("alphanumeric", message)


def iso_date(message: str, as_type: type[date] | type[datetime] = date) -> Check:
    """Require an ISO-8601 date and convert it to ``as_type``."""
    return Check("iso_date", message, as_type)


def choices(values: Sequence[str], message: str) -> Check:
    return Check("choices", message, tuple(values))
