"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Common Dependency Patterns used here:
- Database sessions (per-request)
- Repositories bound to the request's session
- The view renderer (see catalog.rendering)
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from catalog.database import get_db
from catalog.repositories import (
    BookInstanceRepository,
    BookRepository,
    GenreRepository,
)

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def genre_list(db: Session = Depends(get_db)):
#
# You can write:
#   def genre_list(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Repositories
# =============================================================================
# All repositories of one request share the request's session.

def get_genre_repository(db: DbSession) -> GenreRepository:
    return GenreRepository(db)


def get_book_repository(db: DbSession) -> BookRepository:
    return BookRepository(db)


def get_bookinstance_repository(db: DbSession) -> BookInstanceRepository:
    return BookInstanceRepository(db)


GenreRepo = Annotated[GenreRepository, Depends(get_genre_repository)]
BookRepo = Annotated[BookRepository, Depends(get_book_repository)]
BookInstanceRepo = Annotated[BookInstanceRepository, Depends(get_bookinstance_repository)]
