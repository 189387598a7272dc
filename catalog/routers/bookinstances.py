"""
Book Instances Router

Server-rendered CRUD pages for book copies (BookInstance records):

    GET  /bookinstances                 list, with each copy's book
    GET  /bookinstance/create           form with the book select
    POST /bookinstance/create           validate, insert
    GET  /bookinstance/{id}             detail
    GET  /bookinstance/{id}/update      form filled with the copy
    POST /bookinstance/{id}/update      validate, overwrite
    GET  /bookinstance/{id}/delete      confirmation
    POST /bookinstance/{id}/delete      delete

Follows the same patterns as the genres router.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from starlette.responses import Response

from catalog.config import get_settings
from catalog.dependencies import BookInstanceRepo, BookRepo
from catalog.forms import BookInstanceSubmission
from catalog.models import BookInstance, BookInstanceStatus
from catalog.rendering import Renderer
from catalog.repositories import BookInstanceRepository
from catalog.schemas import (
    BookInstanceDeleteView,
    BookInstanceDetailView,
    BookInstanceFormView,
    BookInstanceListView,
)
from catalog.services.rate_limiter import limiter
from catalog.utils import parse_id, see_other

logger = logging.getLogger(__name__)
settings = get_settings()

BOOKINSTANCE_LIST_URL = "/catalog/bookinstances"

router = APIRouter(
    tags=["Book Instances"],
    default_response_class=HTMLResponse,
    responses={
        404: {"description": "Book copy not found"},
    },
)


# The copy and the book list for its form are read sequentially on the
# request session, never concurrently.
def get_bookinstance_or_404(
    bookinstances: BookInstanceRepository,
    bookinstance_id: int,
    populate_book: bool = False,
) -> BookInstance:
    """Get a book copy by ID or raise 404."""
    bookinstance = bookinstances.find_by_id(bookinstance_id, populate_book=populate_book)
    if bookinstance is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Book copy not found",
        )
    return bookinstance


def bookinstance_fields(values: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map sanitized form values to BookInstance columns.

    The status is kept as submitted here; it is checked against
    BookInstanceStatus only when the record is about to be written.
    """
    return {
        "book_id": parse_id(values["book"]),
        "imprint": values["imprint"],
        "status": values["status"],
        "due_back": values["due_back"] or None,
    }


def writable_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Fields ready to store; raises ValueError for an unknown status."""
    return {**fields, "status": BookInstanceStatus.from_form(fields["status"]).value}


@router.get("/bookinstances", summary="List all book copies")
@limiter.limit(settings.rate_limit_default)
def bookinstance_list(
    request: Request,
    bookinstances: BookInstanceRepo,
    renderer: Renderer,
) -> Response:
    view = BookInstanceListView(
        title="Book Instance List",
        bookinstance_list=bookinstances.find_all_with_book(),
    )
    return renderer.render(request, view)


@router.get("/bookinstance/create", summary="Book copy create form")
@limiter.limit(settings.rate_limit_default)
def bookinstance_create_get(
    request: Request,
    books: BookRepo,
    renderer: Renderer,
) -> Response:
    view = BookInstanceFormView(title="Create BookInstance", book_list=books.list_titles())
    return renderer.render(request, view)


@router.post("/bookinstance/create", summary="Create a book copy")
@limiter.limit(settings.rate_limit_write)
def bookinstance_create_post(
    request: Request,
    form: BookInstanceSubmission,
    bookinstances: BookInstanceRepo,
    books: BookRepo,
    renderer: Renderer,
) -> Response:
    """
    Create a copy from the submitted form.

    On validation errors the form is shown again with the submitted values,
    the previously selected book and the messages; nothing is written.
    """
    fields = bookinstance_fields(form.values)
    bookinstance = BookInstance(**fields)

    if not form.is_empty():
        view = BookInstanceFormView(
            title="Create BookInstance",
            book_list=books.list_titles(),
            selected_book=bookinstance.book_id,
            errors=form.errors,
            bookinstance=bookinstance,
        )
        return renderer.render(request, view)

    bookinstance = bookinstances.insert(BookInstance(**writable_fields(fields)))
    return see_other(bookinstance.url)


@router.get("/bookinstance/{bookinstance_id}", summary="Book copy detail")
@limiter.limit(settings.rate_limit_default)
def bookinstance_detail(
    request: Request,
    bookinstance_id: int,
    bookinstances: BookInstanceRepo,
    renderer: Renderer,
) -> Response:
    bookinstance = get_bookinstance_or_404(bookinstances, bookinstance_id, populate_book=True)

    view = BookInstanceDetailView(title="Book:", bookinstance=bookinstance)
    return renderer.render(request, view)


@router.get("/bookinstance/{bookinstance_id}/update", summary="Book copy update form")
@limiter.limit(settings.rate_limit_default)
def bookinstance_update_get(
    request: Request,
    bookinstance_id: int,
    bookinstances: BookInstanceRepo,
    books: BookRepo,
    renderer: Renderer,
) -> Response:
    bookinstance = get_bookinstance_or_404(bookinstances, bookinstance_id)
    book_list = books.list_titles()

    view = BookInstanceFormView(
        title="Update Book Copy",
        book_list=book_list,
        selected_book=bookinstance.book_id,
        bookinstance=bookinstance,
    )
    return renderer.render(request, view)


@router.post("/bookinstance/{bookinstance_id}/update", summary="Update a book copy")
@limiter.limit(settings.rate_limit_write)
def bookinstance_update_post(
    request: Request,
    bookinstance_id: int,
    form: BookInstanceSubmission,
    bookinstances: BookInstanceRepo,
    books: BookRepo,
    renderer: Renderer,
) -> Response:
    """Overwrite every form field of an existing copy."""
    fields = bookinstance_fields(form.values)
    bookinstance = BookInstance(id=bookinstance_id, **fields)

    if not form.is_empty():
        view = BookInstanceFormView(
            title="Update BookInstance",
            book_list=books.list_titles(),
            selected_book=bookinstance.book_id,
            errors=form.errors,
            bookinstance=bookinstance,
        )
        return renderer.render(request, view)

    updated = bookinstances.find_by_id_and_update(bookinstance_id, writable_fields(fields))
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Book copy not found",
        )
    return see_other(updated.url)


@router.get("/bookinstance/{bookinstance_id}/delete", summary="Book copy delete confirmation")
@limiter.limit(settings.rate_limit_default)
def bookinstance_delete_get(
    request: Request,
    bookinstance_id: int,
    bookinstances: BookInstanceRepo,
    renderer: Renderer,
) -> Response:
    """Show the delete confirmation, or go back to the list if the copy is gone."""
    bookinstance = bookinstances.find_by_id(bookinstance_id, populate_book=True)
    if bookinstance is None:
        return see_other(BOOKINSTANCE_LIST_URL)

    view = BookInstanceDeleteView(title="Delete Book Copy", bookinstance=bookinstance)
    return renderer.render(request, view)


@router.post("/bookinstance/{bookinstance_id}/delete", summary="Delete a book copy")
@limiter.limit(settings.rate_limit_write)
def bookinstance_delete_post(
    request: Request,
    bookinstance_id: int,
    bookinstances: BookInstanceRepo,
) -> Response:
    deleted = bookinstances.find_by_id_and_delete(bookinstance_id)
    if deleted is None:
        logger.info(f"Book copy {bookinstance_id} already gone, nothing to delete")
    return see_other(BOOKINSTANCE_LIST_URL)
