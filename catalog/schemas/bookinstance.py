"""
BookInstance View Models

One model per book-copy template:
- BookInstanceListView: bookinstance_list.html
- BookInstanceDetailView: bookinstance_detail.html
- BookInstanceFormView: bookinstance_form.html (create and update)
- BookInstanceDeleteView: bookinstance_delete.html
"""

from typing import ClassVar, List, Optional

from pydantic import Field

from catalog.models import Book, BookInstance, BookInstanceStatus
from catalog.schemas.base import View
from catalog.validation import FieldError


class BookInstanceListView(View):
    template: ClassVar[str] = "bookinstance_list.html"

    bookinstance_list: List[BookInstance] = Field(default_factory=list)


class BookInstanceDetailView(View):
    template: ClassVar[str] = "bookinstance_detail.html"

    bookinstance: BookInstance


class BookInstanceFormView(View):
    """
    Create/update form for a copy.

    `book_list` populates the book select; `selected_book` is the id to
    preselect after a failed submission.
    """

    template: ClassVar[str] = "bookinstance_form.html"

    book_list: List[Book] = Field(default_factory=list)
    selected_book: Optional[int] = None
    bookinstance: Optional[BookInstance] = None
    errors: List[FieldError] = Field(default_factory=list)
    statuses: List[BookInstanceStatus] = Field(
        default_factory=lambda: list(BookInstanceStatus)
    )


class BookInstanceDeleteView(View):
    template: ClassVar[str] = "bookinstance_delete.html"

    bookinstance: BookInstance
