"""
Tests for Repositories

Store operations tested directly against the test session.
"""

from catalog.models import Genre
from catalog.repositories import BookInstanceRepository, BookRepository, GenreRepository


class TestGenreRepository:
    def test_find_all_sorted(self, db_session, multiple_genres):
        names = [genre.name for genre in GenreRepository(db_session).find_all_sorted()]

        assert names == ["Fantasy", "Mystery", "Poetry"]

    def test_find_by_name_ignores_case(self, db_session, sample_genre):
        repo = GenreRepository(db_session)

        assert repo.find_by_name_ci("SCIENCE fiction") == sample_genre
        assert repo.find_by_name_ci("Science") is None

    def test_find_by_name_folds_non_ascii_case(self, db_session):
        genre = GenreRepository(db_session).insert(Genre(name="ÉPOPÉE"))

        assert GenreRepository(db_session).find_by_name_ci("épopée") == genre

    def test_find_by_name_excluding_id(self, db_session, sample_genre):
        repo = GenreRepository(db_session)

        assert repo.find_by_name_ci("science fiction", exclude_id=sample_genre.id) is None

    def test_insert_assigns_id(self, db_session):
        genre = GenreRepository(db_session).insert(Genre(name="Horror"))

        assert genre.id is not None
        assert genre.url == f"/catalog/genre/{genre.id}"

    def test_update_and_delete_unknown_id(self, db_session):
        repo = GenreRepository(db_session)

        assert repo.find_by_id_and_update(99999, {"name": "Horror"}) is None
        assert repo.find_by_id_and_delete(99999) is None

    def test_update_and_delete(self, db_session, sample_genre):
        repo = GenreRepository(db_session)

        updated = repo.find_by_id_and_update(sample_genre.id, {"name": "Space Opera"})
        assert updated.name == "Space Opera"

        deleted = repo.find_by_id_and_delete(sample_genre.id)
        assert deleted is updated
        assert repo.find_by_id(sample_genre.id) is None


class TestBookRepository:
    def test_list_titles_sorted(self, db_session, multiple_books):
        titles = [book.title for book in BookRepository(db_session).list_titles()]

        assert titles == ["Dune", "Emma", "I, Robot"]

    def test_find_by_genre(self, db_session, sample_genre, multiple_books):
        books = BookRepository(db_session).find_by_genre(sample_genre.id)

        assert [book.title for book in books] == ["Dune", "I, Robot"]


class TestBookInstanceRepository:
    def test_find_by_id_with_book(self, db_session, sample_bookinstance):
        bookinstance = BookInstanceRepository(db_session).find_by_id(
            sample_bookinstance.id, populate_book=True
        )

        assert bookinstance.book.title == "Foundation"
        assert bookinstance.due_back_formatted == "Jan 5, 2024"

    def test_find_all_with_book(self, db_session, sample_bookinstance):
        copies = BookInstanceRepository(db_session).find_all_with_book()

        assert [copy.id for copy in copies] == [sample_bookinstance.id]
