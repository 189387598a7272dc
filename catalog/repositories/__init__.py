"""
Repositories Package

Thin wrappers around a SQLAlchemy Session exposing the store operations the
handlers need (find, find by id, update by id, delete by id) with explicit
None results for unknown ids.
"""

from catalog.repositories.book import BookRepository
from catalog.repositories.bookinstance import BookInstanceRepository
from catalog.repositories.genre import GenreRepository

__all__ = [
    "BookRepository",
    "BookInstanceRepository",
    "GenreRepository",
]
