"""
Genre View Models

One model per genre template:
- GenreListView: genre_list.html
- GenreDetailView: genre_detail.html
- GenreFormView: genre_form.html (create and update)
- GenreDeleteView: genre_delete.html (confirmation or blocking list)
"""

from typing import Any, ClassVar, Dict, List, Optional

from pydantic import Field

from catalog.models import Book, Genre
from catalog.schemas.base import View
from catalog.validation import FieldError


class GenreListView(View):
    template: ClassVar[str] = "genre_list.html"

    genre_list: List[Genre] = Field(default_factory=list)


class GenreDetailView(View):
    template: ClassVar[str] = "genre_detail.html"

    genre: Genre
    genre_books: List[Book] = Field(default_factory=list)


class GenreFormView(View):
    """
    Create/update form.

    On a failed submission `genre` holds an unsaved Genre built from the
    sanitized input and `errors` the failed checks.
    """

    template: ClassVar[str] = "genre_form.html"

    genre: Optional[Genre] = None
    genre_books: List[Book] = Field(default_factory=list)
    errors: List[FieldError] = Field(default_factory=list)


class GenreDeleteView(View):
    template: ClassVar[str] = "genre_delete.html"

    genre: Genre
    genre_books: List[Book] = Field(default_factory=list)

    @property
    def is_blocked(self) -> bool:
        """A genre can't be deleted while books still refer to it."""
        return len(self.genre_books) > 0

    def context(self) -> Dict[str, Any]:
        return {**super().context(), "is_blocked": self.is_blocked}
