"""
Catalog Forms

Pydantic models for the genre and book-copy forms, exposed as FastAPI
dependencies so a submission is validated and sanitized before the route
handler body runs.

Text fields are trimmed, checked, then HTML-escaped. Length limits apply to
the escaped value, since that is what gets stored.

Usage in a route:
    @router.post("/genre/create")
    def genre_create_post(request: Request, form: GenreSubmission, ...):
        if not form.is_empty():
            ...  # re-render with form.errors
"""

from datetime import date
from typing import Annotated, Any, ClassVar, Dict, Mapping, Optional

from fastapi import Depends, Form
from pydantic import AfterValidator, Field, StringConstraints, field_validator

from catalog.validation import (
    FormModel,
    ValidationResult,
    escape_html,
    form_error,
    parse_iso8601,
    sanitize_text,
)

GENRE_NAME_MAX_LENGTH = 100
IMPRINT_MAX_LENGTH = 500

GENRE_NAME_MESSAGE = "Genre name must contain at least 3 characters"
GENRE_NAME_TOO_LONG_MESSAGE = f"Genre name must be at most {GENRE_NAME_MAX_LENGTH} characters"
IMPRINT_TOO_LONG_MESSAGE = f"Imprint must be at most {IMPRINT_MAX_LENGTH} characters"


def escaped(max_length: Optional[int] = None, too_long: str = "") -> AfterValidator:
    """Escape the value, then enforce max_length on the escaped text."""

    def validate(value: str) -> str:
        value = escape_html(value)
        if max_length is not None and len(value) > max_length:
            raise form_error(too_long)
        return value

    return AfterValidator(validate)


class GenreForm(FormModel):
    name: Annotated[
        str,
        StringConstraints(strip_whitespace=True, min_length=3),
        escaped(GENRE_NAME_MAX_LENGTH, GENRE_NAME_TOO_LONG_MESSAGE),
    ]

    messages: ClassVar[Dict[str, str]] = {"name": GENRE_NAME_MESSAGE}

    @classmethod
    def sanitize(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
        return {"name": sanitize_text(data.get("name"))}


class BookInstanceForm(FormModel):
    """
    A physical copy of a book.

    `book` is the id of the selected Book as submitted; `status` is only
    escaped here and checked against BookInstanceStatus when the record is
    written. An empty due date means "no date".
    """

    book: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1), escaped()]
    imprint: Annotated[
        str,
        StringConstraints(strip_whitespace=True, min_length=1),
        escaped(IMPRINT_MAX_LENGTH, IMPRINT_TOO_LONG_MESSAGE),
    ]
    status: Annotated[str, escaped()] = ""
    due_back: Optional[date] = Field(default=None)

    messages: ClassVar[Dict[str, str]] = {
        "book": "Book must be specified",
        "imprint": "Imprint must be specified",
        "due_back": "Invalid date",
    }

    @field_validator("due_back", mode="before")
    @classmethod
    def parse_due_back(cls, v: Any) -> Optional[date]:
        if not v:
            return None
        parsed = parse_iso8601(v)
        if parsed is None:
            raise ValueError("due_back must be an ISO-8601 date")
        return parsed

    @classmethod
    def sanitize(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
        return {
            "book": sanitize_text(data.get("book")),
            "imprint": sanitize_text(data.get("imprint")),
            "status": escape_html(data.get("status")),
            "due_back": parse_iso8601(data.get("due_back")),
        }


def validate_genre_form(
    name: Annotated[str, Form()] = "",
) -> ValidationResult:
    return GenreForm.validate_form({"name": name})


def validate_bookinstance_form(
    book: Annotated[str, Form()] = "",
    imprint: Annotated[str, Form()] = "",
    status: Annotated[str, Form()] = "",
    due_back: Annotated[str, Form()] = "",
) -> ValidationResult:
    return BookInstanceForm.validate_form(
        {
            "book": book,
            "imprint": imprint,
            "status": status,
            "due_back": due_back,
        }
    )


GenreSubmission = Annotated[ValidationResult, Depends(validate_genre_form)]
BookInstanceSubmission = Annotated[ValidationResult, Depends(validate_bookinstance_form)]
