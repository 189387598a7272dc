"""
SQLAlchemy Models Package

Model Relationships:
- Genre <-> Book: Many-to-Many (a book can belong to multiple genres,
                  a genre contains many books)
- Book -> BookInstance: One-to-Many (a book has many physical copies)

Import all models here to:
1. Make them available as: from catalog.models import Book, Genre
2. Ensure Alembic discovers them for migrations
"""

# The order matters for SQLAlchemy to resolve relationships
from catalog.models.genre import Genre
from catalog.models.book import Book, book_genres
from catalog.models.bookinstance import BookInstance, BookInstanceStatus

__all__ = [
    "Genre",
    "Book",
    "book_genres",
    "BookInstance",
    "BookInstanceStatus",
]
