"""Unit tests for the rule evaluation pipeline."""

from datetime import UTC, date, datetime

import pytest

from src.catalog.core.validation import escape_markup, normalize_many, validate
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


class TestNormalizeMany:
    """Coercion of multi-valued fields."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (None, []),
            ("g1", ["g1"]),
            (["g1", "g2"], ["g1", "g2"]),
            ([], []),
            (("g1", None, "g2"), ["g1", "g2"]),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_many(raw) == expected

    def test_scalar_genre_becomes_list_before_checks(self):
        result = validate({"genre": " g1 "}, [rule("genre", trim(), many=True)])
        assert result.values["genre"] == ["g1"]

    def test_missing_genre_is_empty_list(self):
        result = validate({}, [rule("genre", trim(), escape(), many=True)])
        assert result.values["genre"] == []
        assert result.is_valid


class TestEscapeMarkup:
    def test_escapes_markup_characters(self):
        assert escape_markup("<b>A & B</b>") == "&lt;b&gt;A &amp; B&lt;&#x2F;b&gt;"

    def test_escapes_quotes_and_backtick(self):
        assert escape_markup("\"it's\" `x` \\") == "&quot;it&#x27;s&quot; &#96;x&#96; &#x5C;"

    def test_plain_text_unchanged(self):
        assert escape_markup("Fantasy") == "Fantasy"


class TestValidate:
    def test_trim_then_escape(self):
        result = validate({"name": "  <i>Poetry</i> "}, [rule("name", trim(), escape())])
        assert result.values["name"] == "&lt;i&gt;Poetry&lt;&#x2F;i&gt;"
        assert result.is_valid

    def test_first_failing_check_wins(self):
        rules = [rule("name", trim(), min_length(3, "too short"), alphanumeric("not alnum"))]
        result = validate({"name": " !"}, rules)

        assert [error.message for error in result.errors] == ["too short"]
        assert result.errors[0].field == "name"

    def test_errors_accumulate_across_fields(self):
        rules = [
            rule("first", trim(), min_length(1, "first missing")),
            rule("second", trim(), min_length(1, "second missing")),
        ]
        result = validate({"first": "", "second": "   "}, rules)

        assert not result.is_valid
        assert [error.field for error in result.errors] == ["first", "second"]

    def test_max_length(self):
        result = validate({"name": "x" * 5}, [rule("name", max_length(4, "too long"))])
        assert result.errors_for("name")[0].message == "too long"

    def test_failed_value_is_kept_for_redisplay(self):
        result = validate({"name": "ab"}, [rule("name", min_length(3, "short"))])
        assert result.values["name"] == "ab"

    def test_optional_empty_value_stops_checks(self):
        rules = [rule("born", optional(), iso_date("bad date"))]
        result = validate({"born": ""}, rules)

        assert result.is_valid
        assert result.values["born"] is None

    def test_optional_default(self):
        rules = [rule("status", trim(), optional(default="Maintenance"))]
        assert validate({}, rules).values["status"] == "Maintenance"

    def test_iso_date_parses_date(self):
        result = validate({"born": "1920-01-02"}, [rule("born", iso_date("bad"))])
        assert result.values["born"] == date(1920, 1, 2)

    def test_iso_date_as_datetime(self):
        rules = [rule("due", iso_date("bad", as_type=datetime))]
        assert validate({"due": "2024-05-01"}, rules).values["due"] == datetime(
            2024, 5, 1, tzinfo=UTC
        )

    def test_iso_date_rejects_garbage(self):
        result = validate({"born": "yesterday"}, [rule("born", iso_date("bad date"))])
        assert result.errors_for("born")[0].message == "bad date"

    def test_choices(self):
        rules = [rule("status", choices(("Available", "Loaned"), "bad status"))]
        assert validate({"status": "Loaned"}, rules).is_valid
        assert not validate({"status": "Lost"}, rules).is_valid

    def test_repeated_scalar_field_keeps_last_value(self):
        result = validate({"name": ["first", "last"]}, [rule("name", trim())])
        assert result.values["name"] == "last"

    def test_add_error_after_validation(self):
        result = validate({"name": "ok"}, [rule("name", trim())])
        result.add_error("name", "taken", "ok")

        assert not result.is_valid
        assert result.errors_for("name")[0].value == "ok"
