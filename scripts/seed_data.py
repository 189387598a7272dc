#!/usr/bin/env python3
"""
Database Seed Script

Populates the catalog with sample genres, books and book copies for
development.

USAGE:
    # From the project root with the venv activated
    python scripts/seed_data.py
"""

import sys
from datetime import date
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from catalog.database import SessionLocal, create_tables
from catalog.models import Book, BookInstance, BookInstanceStatus, Genre, book_genres


def clear_data(db: Session) -> None:
    """Clear all existing catalog data."""
    print("Clearing existing data...")
    db.execute(delete(BookInstance))
    db.execute(delete(book_genres))
    db.execute(delete(Book))
    db.execute(delete(Genre))
    db.commit()
    print("Data cleared.")


def create_genres(db: Session) -> dict[str, Genre]:
    print("Creating genres...")
    names = ["Fantasy", "Science Fiction", "French Poetry", "Mystery"]

    genres = {name: Genre(name=name) for name in names}
    db.add_all(genres.values())
    db.commit()

    print(f"Created {len(genres)} genres.")
    return genres


def create_books(db: Session, genres: dict[str, Genre]) -> dict[str, Book]:
    """Create sample books linked to their genres."""
    print("Creating books...")
    books_data = [
        {
            "title": "The Name of the Wind",
            "summary": "The tale of Kvothe, from his childhood in a troupe of traveling players "
                       "to his years as a near-feral orphan.",
            "isbn": "9781473211896",
            "genres": ["Fantasy"],
        },
        {
            "title": "The Wise Man's Fear",
            "summary": "Picking up where The Name of the Wind left off, Kvothe seeks answers "
                       "about the Chandrian.",
            "isbn": "9788401352836",
            "genres": ["Fantasy"],
        },
        {
            "title": "Apes and Angels",
            "summary": "Humankind's first colonists are on a far-flung planet when a wave of "
                       "destruction spreads across the galaxy.",
            "isbn": "9780765379528",
            "genres": ["Science Fiction"],
        },
        {
            "title": "Death Wave",
            "summary": "Ben Bova's saga of humanity's expansion into space continues.",
            "isbn": "9780765379504",
            "genres": ["Science Fiction"],
        },
        {
            "title": "Test Book 1",
            "summary": "Summary of test book 1",
            "isbn": "ISBN111111",
            "genres": ["French Poetry", "Mystery"],
        },
    ]

    books = {}
    for data in books_data:
        genre_names = data.pop("genres")
        book = Book(**data)
        book.genres = [genres[name] for name in genre_names]
        books[book.title] = book

    db.add_all(books.values())
    db.commit()

    print(f"Created {len(books)} books.")
    return books


def create_bookinstances(db: Session, books: dict[str, Book]) -> list[BookInstance]:
    """Create physical copies in each status."""
    print("Creating book instances...")
    instances_data = [
        ("The Name of the Wind", "London Gollancz, 2014.", BookInstanceStatus.AVAILABLE, date(2020, 8, 10)),
        ("The Wise Man's Fear", " Gollancz, 2011.", BookInstanceStatus.LOANED, date(2020, 8, 10)),
        ("Apes and Angels", "New York Tom Doherty Associates, 2016.", BookInstanceStatus.AVAILABLE, None),
        ("Apes and Angels", "New York Tom Doherty Associates, 2016.", BookInstanceStatus.MAINTENANCE, None),
        ("Death Wave", "New York, NY Tom Doherty Associates, LLC, 2015.", BookInstanceStatus.LOANED, date(2020, 8, 10)),
        ("Test Book 1", "Imprint XXX2", BookInstanceStatus.RESERVED, None),
    ]

    instances = [
        BookInstance(
            book=books[title],
            imprint=imprint,
            status=status.value,
            due_back=due_back,
        )
        for title, imprint, status, due_back in instances_data
    ]
    db.add_all(instances)
    db.commit()

    print(f"Created {len(instances)} book instances.")
    return instances


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()
    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        genres = create_genres(db)
        books = create_books(db, genres)
        instances = create_bookinstances(db, books)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Genres: {len(genres)}")
        print(f"  - Books: {len(books)}")
        print(f"  - Book instances: {len(instances)}")
        print("\nBrowse the catalog at http://localhost:8001/catalog/genres")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
