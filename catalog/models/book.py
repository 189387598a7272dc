"""
Book Model

Books are managed elsewhere; the catalog handlers only read them: the
title list populates the copy form, and genre membership decides whether a
genre may be deleted.

This file also contains the book_genres association table.
"""

from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database import Base

if TYPE_CHECKING:
    from catalog.models.bookinstance import BookInstance
    from catalog.models.genre import Genre


# =============================================================================
# Association Tables
# =============================================================================
book_genres = Table(
    "book_genres",
    Base.metadata,
    Column(
        "book_id",
        Integer,
        ForeignKey("books.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "genre_id",
        Integer,
        ForeignKey("genres.id"),
        primary_key=True,
    ),
    comment="Association table linking books to their genres",
)


class Book(Base):
    """
    Book model representing titles held by the library.

    Table: books

    Relationships:
    - genres: Many-to-Many (a book can belong to multiple genres)
    - instances: One-to-Many (physical copies of the book)
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    summary: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Short summary shown on genre pages"
    )

    isbn: Mapped[str | None] = mapped_column(
        String(20),
        nullable=True,
        comment="International Standard Book Number"
    )

    genres: Mapped[list["Genre"]] = relationship(
        "Genre",
        secondary=book_genres,
        back_populates="books",
    )

    instances: Mapped[list["BookInstance"]] = relationship(
        "BookInstance",
        back_populates="book",
    )

    @property
    def url(self) -> str:
        return f"/catalog/book/{self.id}"

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}')"
