"""
View Model Schemas Package

Pydantic models describing the data each HTML template receives.

Schema Naming Convention:
- XxxListView: list page
- XxxDetailView: single record page
- XxxFormView: create/update form (with validation errors)
- XxxDeleteView: delete confirmation page
"""

from catalog.schemas.base import ErrorView, View
from catalog.schemas.bookinstance import (
    BookInstanceDeleteView,
    BookInstanceDetailView,
    BookInstanceFormView,
    BookInstanceListView,
)
from catalog.schemas.genre import (
    GenreDeleteView,
    GenreDetailView,
    GenreFormView,
    GenreListView,
)

__all__ = [
    "View",
    "ErrorView",
    # Genre views
    "GenreListView",
    "GenreDetailView",
    "GenreFormView",
    "GenreDeleteView",
    # BookInstance views
    "BookInstanceListView",
    "BookInstanceDetailView",
    "BookInstanceFormView",
    "BookInstanceDeleteView",
]
