"""
Genres Router

Server-rendered CRUD pages for genres:

    GET  /genres                 list, sorted by name
    GET  /genre/create           empty form
    POST /genre/create           validate, de-duplicate, insert
    GET  /genre/{id}             detail with the genre's books
    GET  /genre/{id}/update      form filled with the genre
    POST /genre/{id}/update      validate, de-duplicate, overwrite
    GET  /genre/{id}/delete      confirmation (or the books blocking it)
    POST /genre/{id}/delete      delete unless books still refer to it

Successful submissions redirect with 303; failed validation re-renders
the form with the sanitized input and the error messages.
"""

import logging

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from starlette.responses import Response

from catalog.config import get_settings
from catalog.dependencies import BookRepo, GenreRepo
from catalog.forms import GenreSubmission
from catalog.models import Genre
from catalog.rendering import Renderer
from catalog.repositories import GenreRepository
from catalog.schemas import (
    GenreDeleteView,
    GenreDetailView,
    GenreFormView,
    GenreListView,
)
from catalog.services.rate_limiter import limiter
from catalog.utils import see_other

logger = logging.getLogger(__name__)
settings = get_settings()

GENRE_LIST_URL = "/catalog/genres"

router = APIRouter(
    tags=["Genres"],
    default_response_class=HTMLResponse,
    responses={
        404: {"description": "Genre not found"},
    },
)


# Handlers that show a genre with its books issue the two reads one after
# the other on the request session; both finish before rendering.
def get_genre_or_404(genres: GenreRepository, genre_id: int) -> Genre:
    """Get a genre by ID or raise 404."""
    genre = genres.find_by_id(genre_id)
    if genre is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Genre not found",
        )
    return genre


@router.get("/genres", summary="List all genres")
@limiter.limit(settings.rate_limit_default)
def genre_list(request: Request, genres: GenreRepo, renderer: Renderer) -> Response:
    view = GenreListView(title="Genre List", genre_list=genres.find_all_sorted())
    return renderer.render(request, view)


# The create routes are declared before /genre/{genre_id} so that
# "create" is never parsed as an id.
@router.get("/genre/create", summary="Genre create form")
@limiter.limit(settings.rate_limit_default)
def genre_create_get(request: Request, renderer: Renderer) -> Response:
    return renderer.render(request, GenreFormView(title="Create Genre"))


@router.post("/genre/create", summary="Create a genre")
@limiter.limit(settings.rate_limit_write)
def genre_create_post(
    request: Request,
    form: GenreSubmission,
    genres: GenreRepo,
    renderer: Renderer,
) -> Response:
    """
    Create a genre from the submitted form.

    If a genre with the same name already exists (ignoring case), redirect
    to it instead of creating a duplicate.
    """
    genre = Genre(name=form.values["name"])

    if not form.is_empty():
        view = GenreFormView(title="Create Genre", genre=genre, errors=form.errors)
        return renderer.render(request, view)

    existing = genres.find_by_name_ci(genre.name)
    if existing is not None:
        logger.info(f"Genre '{genre.name}' already exists as {existing!r}")
        return see_other(existing.url)

    genres.insert(genre)
    return see_other(genre.url)


@router.get("/genre/{genre_id}", summary="Genre detail")
@limiter.limit(settings.rate_limit_default)
def genre_detail(
    request: Request,
    genre_id: int,
    genres: GenreRepo,
    books: BookRepo,
    renderer: Renderer,
) -> Response:
    genre = get_genre_or_404(genres, genre_id)
    genre_books = books.find_by_genre(genre_id)

    view = GenreDetailView(title="Genre Detail", genre=genre, genre_books=genre_books)
    return renderer.render(request, view)


@router.get("/genre/{genre_id}/update", summary="Genre update form")
@limiter.limit(settings.rate_limit_default)
def genre_update_get(
    request: Request,
    genre_id: int,
    genres: GenreRepo,
    books: BookRepo,
    renderer: Renderer,
) -> Response:
    genre = get_genre_or_404(genres, genre_id)
    genre_books = books.find_by_genre(genre_id)

    view = GenreFormView(title="Update Genre", genre=genre, genre_books=genre_books)
    return renderer.render(request, view)


@router.post("/genre/{genre_id}/update", summary="Update a genre")
@limiter.limit(settings.rate_limit_write)
def genre_update_post(
    request: Request,
    genre_id: int,
    form: GenreSubmission,
    genres: GenreRepo,
    renderer: Renderer,
) -> Response:
    """
    Rename a genre.

    If another genre already has the new name (ignoring case), redirect to
    that genre and leave this one unchanged. The genre being edited is not
    considered a duplicate of itself, so case-only renames go through.
    """
    genre = Genre(id=genre_id, name=form.values["name"])

    if not form.is_empty():
        view = GenreFormView(title="Update Genre", genre=genre, errors=form.errors)
        return renderer.render(request, view)

    existing = genres.find_by_name_ci(genre.name, exclude_id=genre_id)
    if existing is not None:
        logger.info(f"Genre '{genre.name}' already exists as {existing!r}")
        return see_other(existing.url)

    updated = genres.find_by_id_and_update(genre_id, {"name": genre.name})
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Genre not found",
        )
    return see_other(updated.url)


@router.get("/genre/{genre_id}/delete", summary="Genre delete confirmation")
@limiter.limit(settings.rate_limit_default)
def genre_delete_get(
    request: Request,
    genre_id: int,
    genres: GenreRepo,
    books: BookRepo,
    renderer: Renderer,
) -> Response:
    """
    Show the delete page.

    The page lists the genre's books; when there are any it asks the user
    to remove them first instead of offering the delete button.
    """
    genre = get_genre_or_404(genres, genre_id)
    genre_books = books.find_by_genre(genre_id)

    view = GenreDeleteView(title="Delete Genre", genre=genre, genre_books=genre_books)
    return renderer.render(request, view)


@router.post("/genre/{genre_id}/delete", summary="Delete a genre")
@limiter.limit(settings.rate_limit_write)
def genre_delete_post(
    request: Request,
    genre_id: int,
    genres: GenreRepo,
    books: BookRepo,
    renderer: Renderer,
) -> Response:
    """Delete a genre, unless books still refer to it."""
    genre = get_genre_or_404(genres, genre_id)
    genre_books = books.find_by_genre(genre_id)

    if genre_books:
        logger.info(
            f"Refusing to delete {genre!r}: referenced by {len(genre_books)} book(s)"
        )
        view = GenreDeleteView(title="Delete Genre", genre=genre, genre_books=genre_books)
        return renderer.render(request, view)

    genres.find_by_id_and_delete(genre_id)
    return see_other(GENRE_LIST_URL)
