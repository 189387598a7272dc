"""
Tests for Form Validation

Unit tests for the form models and sanitizers; no HTTP or database involved.
"""

from datetime import date

from catalog.forms import (
    GENRE_NAME_MESSAGE,
    GENRE_NAME_TOO_LONG_MESSAGE,
    IMPRINT_TOO_LONG_MESSAGE,
    BookInstanceForm,
    GenreForm,
)
from catalog.models import BookInstanceStatus
from catalog.utils import parse_id
from catalog.validation import escape_html, parse_iso8601, sanitize_text


def valid_bookinstance(**overrides) -> dict:
    data = {"book": "7", "imprint": "Gollancz", "status": "Loaned", "due_back": ""}
    data.update(overrides)
    return data


class TestParseIso8601:
    """Tests for parse_iso8601."""

    def test_plain_date(self):
        assert parse_iso8601("2024-01-05") == date(2024, 1, 5)

    def test_basic_format(self):
        assert parse_iso8601("20240105") == date(2024, 1, 5)

    def test_datetime_is_truncated_to_date(self):
        assert parse_iso8601("2024-01-05T10:30:00") == date(2024, 1, 5)
        assert parse_iso8601("2024-01-05T10:30Z") == date(2024, 1, 5)

    def test_reduced_precision(self):
        """Year-month and year alone mean the first day of the period."""
        assert parse_iso8601("2024-01") == date(2024, 1, 1)
        assert parse_iso8601("2024") == date(2024, 1, 1)

    def test_invalid_strings(self):
        assert parse_iso8601("05/01/2024") is None
        assert parse_iso8601("2024-13-01") is None
        assert parse_iso8601("tomorrow") is None
        assert parse_iso8601("") is None
        assert parse_iso8601(None) is None


class TestSanitizers:
    def test_sanitize_text_trims_then_escapes(self):
        assert sanitize_text("  <i>Poetry</i> ") == "&lt;i&gt;Poetry&lt;/i&gt;"

    def test_escape_html_keeps_whitespace(self):
        assert escape_html(" a&b ") == " a&amp;b "
        assert escape_html(None) == ""


class TestGenreForm:
    """Tests for GenreForm.validate_form."""

    def test_valid_name_is_trimmed_and_escaped(self):
        result = GenreForm.validate_form({"name": "  Sci & Fi "})

        assert result.is_empty()
        assert result.values == {"name": "Sci &amp; Fi"}

    def test_name_too_short(self):
        """The trimmed input is kept for re-display."""
        result = GenreForm.validate_form({"name": "  AB  "})

        assert result.values["name"] == "AB"
        assert [error.msg for error in result.errors] == [GENRE_NAME_MESSAGE]
        assert result.errors_for("name")[0].field == "name"

    def test_missing_name(self):
        result = GenreForm.validate_form({})

        assert result.values == {"name": ""}
        assert [error.msg for error in result.errors] == [GENRE_NAME_MESSAGE]

    def test_name_length_limit(self):
        assert GenreForm.validate_form({"name": "x" * 100}).is_empty()

        result = GenreForm.validate_form({"name": "x" * 101})
        assert [error.msg for error in result.errors] == [GENRE_NAME_TOO_LONG_MESSAGE]

    def test_name_length_limit_applies_after_escaping(self):
        """Twenty '&' escape to exactly 100 characters; one more is too long."""
        assert GenreForm.validate_form({"name": "&" * 20}).values["name"] == "&amp;" * 20

        result = GenreForm.validate_form({"name": "&" * 21})
        assert [error.msg for error in result.errors] == [GENRE_NAME_TOO_LONG_MESSAGE]


class TestBookInstanceForm:
    """Tests for BookInstanceForm.validate_form."""

    def test_valid(self):
        result = BookInstanceForm.validate_form(
            valid_bookinstance(imprint=" Gollancz ", due_back="2024-03-01")
        )

        assert result.is_empty()
        assert result.values == {
            "book": "7",
            "imprint": "Gollancz",
            "status": "Loaned",
            "due_back": date(2024, 3, 1),
        }

    def test_empty_due_back_is_none(self):
        result = BookInstanceForm.validate_form(valid_bookinstance(due_back=""))

        assert result.is_empty()
        assert result.values["due_back"] is None

    def test_reduced_precision_due_back(self):
        result = BookInstanceForm.validate_form(valid_bookinstance(due_back="2024-01"))

        assert result.is_empty()
        assert result.values["due_back"] == date(2024, 1, 1)

    def test_all_messages(self):
        result = BookInstanceForm.validate_form(
            {"book": "", "imprint": "   ", "status": "", "due_back": "tomorrow"}
        )

        assert sorted(error.msg for error in result.errors) == [
            "Book must be specified",
            "Imprint must be specified",
            "Invalid date",
        ]
        assert result.values == {"book": "", "imprint": "", "status": "", "due_back": None}

    def test_imprint_length_limit(self):
        result = BookInstanceForm.validate_form(valid_bookinstance(imprint="<" * 126))

        assert [error.msg for error in result.errors] == [IMPRINT_TOO_LONG_MESSAGE]

    def test_status_is_escaped_not_checked(self):
        result = BookInstanceForm.validate_form(valid_bookinstance(status="<Lost>"))

        assert result.is_empty()
        assert result.values["status"] == "&lt;Lost&gt;"


class TestHelpers:
    def test_status_from_form(self):
        assert BookInstanceStatus.from_form("") is BookInstanceStatus.MAINTENANCE
        assert BookInstanceStatus.from_form("Loaned") is BookInstanceStatus.LOANED

    def test_parse_id(self):
        assert parse_id("12") == 12
        assert parse_id(" 3 ") == 3
        assert parse_id("abc") is None
        assert parse_id("") is None
        assert parse_id(None) is None
