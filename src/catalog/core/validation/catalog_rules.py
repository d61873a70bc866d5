"""Field rules for the catalog forms."""

from collections.abc import Mapping
from typing import Any

from src.catalog.core.validation.pipeline import ValidationResult, validate
from src.catalog.core.validation.rules import (
    alphanumeric,
    choices,
    escape,
    iso_date,
    max_length,
    min_length,
    optional,
    rule,
    trim,
)
from src.catalog.entities.service.bookinstance.entity import DEFAULT_STATUS, STATUS_VALUES

GENRE_RULES = (
    rule(
        "name",
        trim(),
        escape(),
        min_length(3, "Genre name must contain at least 3 characters"),
        max_length(100, "Genre name must not exceed 100 characters"),
    ),
)

AUTHOR_RULES = (
    rule(
        "first_name",
        trim(),
        escape(),
        min_length(1, "First name must be specified."),
        max_length(100, "First name must not exceed 100 characters."),
        alphanumeric("First name has non-alphanumeric characters."),
    ),
    rule(
        "family_name",
        trim(),
        escape(),
        min_length(1, "Family name must be specified."),
        max_length(100, "Family name must not exceed 100 characters."),
        alphanumeric("Family name has non-alphanumeric characters."),
    ),
    rule("date_of_birth", optional(), iso_date("Invalid date of birth")),
    rule("date_of_death", optional(), iso_date("Invalid date of death")),
)

BOOK_RULES = (
    rule("title", trim(), escape(), min_length(1, "Title must not be empty.")),
    rule("author", trim(), escape(), min_length(1, "Author must not be empty.")),
    rule("summary", trim(), escape(), min_length(1, "Summary must not be empty.")),
    rule("isbn", trim(), escape(), min_length(1, "ISBN must not be empty.")),
    rule("genre", trim(), escape(), many=True),
)

BOOKINSTANCE_RULES = (
    rule("book", trim(), escape(), min_length(1, "Book must be specified")),
    rule("imprint", trim(), escape(), min_length(1, "Imprint must be specified")),
    rule(
        "status",
        trim(),
        optional(default=DEFAULT_STATUS.value),
        escape(),
        choices(STATUS_VALUES, f"Status must be one of: {', '.join(STATUS_VALUES)}"),
    ),
    rule("due_back", optional(), iso_date("Invalid date")),
)


def validate_genre(data: Mapping[str, Any]) -> ValidationResult:
    return validate(data, GENRE_RULES)


def validate_author(data: Mapping[str, Any]) -> ValidationResult:
    """Validate author fields, then check the dates against each other."""
    result = validate(data, AUTHOR_RULES)
    born = result.values.get("date_of_birth")
    died = result.values.get("date_of_death")
    if (
        born is not None
        and died is not None
        and not result.errors_for("date_of_birth")
        and not result.errors_for("date_of_death")
        and died < born
    ):
        result.add_error(
            "date_of_death", "Date of death must not be before date of birth", died
        )
    return result


def validate_book(data: Mapping[str, Any]) -> ValidationResult:
    return validate(data, BOOK_RULES)


def validate_book_instance(data: Mapping[str, Any]) -> ValidationResult:
    return validate(data, BOOKINSTANCE_RULES)
