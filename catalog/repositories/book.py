"""Read-only Book lookups used by the genre and copy handlers."""

from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session, load_only

from catalog.models import Book, Genre


class BookRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_titles(self) -> List[Book]:
        """Every book (id and title only), sorted by title for select lists."""
        stmt = select(Book).options(load_only(Book.id, Book.title)).order_by(Book.title)
        return list(self.db.execute(stmt).scalars().all())

    def find_by_genre(self, genre_id: int) -> List[Book]:
        """Books tagged with the genre, with the fields shown on genre pages."""
        stmt = (
            select(Book)
            .options(load_only(Book.id, Book.title, Book.summary))
            .join(Book.genres)
            .where(Genre.id == genre_id)
            .order_by(Book.title)
        )
        return list(self.db.execute(stmt).scalars().all())
