"""Fixture data loaded into every new store."""

from .types import AuthorRecord, BookRecord

SEED_AUTHORS: list[tuple[int, str]] = [
    (1, "J. K. Rowling"),
    (2, "J. R. R. Tolkien"),
    (3, "Brent Weeks"),
]

SEED_BOOKS: list[tuple[int, str, int]] = [
    (1, "Harry Porter and the Chamber of Secrets", 1),
    (2, "Harry Porter and the Prisoner of Azkaban", 1),
    (3, "Harry Porter and the Goblet of Fire", 1),
    (4, "The Fellowship of the Ring", 2),
    (5, "The Two Towers", 2),
    (6, "The Return of the King", 2),
    (7, "The Way of Shadows", 3),
    (8, "Beyond the Shadows", 3),
]


def seed_authors() -> list[AuthorRecord]:
    """Build fresh author records from the fixture."""
    return [AuthorRecord(id=author_id, name=name) for author_id, name in SEED_AUTHORS]


def seed_books() -> list[BookRecord]:
    """Build fresh book records from the fixture."""
    return [
        BookRecord(id=book_id, name=name, author_id=author_id)
        for book_id, name, author_id in SEED_BOOKS
    ]
