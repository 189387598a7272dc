"""
Form Validation and Sanitization

Submitted HTML forms are validated by pydantic models (see catalog.forms).
This module holds the pieces those models share:

- sanitizers: escape_html / sanitize_text
- parse_iso8601 for date fields
- FieldError, the shape of one message shown next to a form
- FormModel, a BaseModel whose validate_form() never raises: a failed
  submission comes back as a ValidationResult with the form's messages and
  the sanitized input, so the page can be rendered again

Usage:
    result = GenreForm.validate_form({"name": "  AB "})
    result.is_empty()        # False
    result.values["name"]    # "AB"
    result.errors[0].msg     # "Genre name must contain at least 3 characters"
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, ClassVar, Dict, List, Mapping, Optional

from dateutil.parser import isoparse
from markupsafe import escape
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_core import ErrorDetails, PydanticCustomError

# Error type for validators that already carry the message to display
FORM_ERROR = "form_error"


def form_error(message: str) -> PydanticCustomError:
    return PydanticCustomError(FORM_ERROR, message)


# =============================================================================
# Sanitizers
# =============================================================================
def escape_html(value: Any) -> str:
    """HTML-escape a submitted value so it can be stored and re-displayed."""
    return str(escape("" if value is None else value))


def sanitize_text(value: Any) -> str:
    """Trim, then escape."""
    return escape_html(("" if value is None else str(value)).strip())


def parse_iso8601(value: Any) -> Optional[date]:
    """
    Parse an ISO-8601 date or datetime string to a date.

    Reduced precision is allowed: "2024" and "2024-01" are the first day of
    the year/month. Also accepts "20240105" and "2024-01-05T10:30:00Z".

    Returns:
        The calendar date, or None if the string isn't ISO-8601
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = "" if value is None else str(value).strip()
    if not text:
        return None
    try:
        return isoparse(text).date()
    except (ValueError, OverflowError):
        return None


# =============================================================================
# Results
# =============================================================================
class FieldError(BaseModel):
    """One failed check: which field, why, and the value that failed."""

    field: str
    msg: str
    value: Any = None

    model_config = ConfigDict(frozen=True)


@dataclass
class ValidationResult:
    """Sanitized values of every form field plus the collected errors."""

    values: Dict[str, Any] = field(default_factory=dict)
    errors: List[FieldError] = field(default_factory=list)

    def is_empty(self) -> bool:
        """True when no check failed."""
        return not self.errors

    def errors_for(self, field_name: str) -> List[FieldError]:
        return [error for error in self.errors if error.field == field_name]


# =============================================================================
# Form models
# =============================================================================
class FormModel(BaseModel):
    """
    Base class for submitted forms.

    Subclasses declare their fields with pydantic constraints and map each
    field to the message shown when one of its built-in checks fails.
    Validators raising form_error() supply their own message instead.
    """

    messages: ClassVar[Dict[str, str]] = {}

    @classmethod
    def sanitize(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Values to show in the form again after a failed submission."""
        return {name: data.get(name) for name in cls.model_fields}

    @classmethod
    def field_error(cls, error: ErrorDetails) -> FieldError:
        name = str(error["loc"][0]) if error["loc"] else "form"
        if error["type"] == FORM_ERROR:
            msg = error["msg"]
        else:
            msg = cls.messages.get(name, error["msg"])
        value = None if error["type"] == "missing" else error.get("input")
        return FieldError(field=name, msg=msg, value=value)

    @classmethod
    def validate_form(cls, data: Mapping[str, Any]) -> ValidationResult:
        try:
            form = cls.model_validate(dict(data))
        except ValidationError as exc:
            return ValidationResult(
                values=cls.sanitize(data),
                errors=[cls.field_error(error) for error in exc.errors()],
            )
        return ValidationResult(values=form.model_dump())
