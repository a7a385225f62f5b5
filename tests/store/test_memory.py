"""Tests for the in-memory library store."""

import logging

import pytest

from store import (
    SEED_AUTHORS,
    SEED_BOOKS,
    AuthorRecord,
    BookRecord,
    IdStrategy,
    LibraryStore,
    NotFoundError,
)


class TestSeed:
    """Tests for the seeded fixture data."""

    def test_authors_in_order(self, store):
        """Test that the three fixture authors are loaded in order."""
        assert [(a.id, a.name) for a in store.authors] == [
            (1, "J. K. Rowling"),
            (2, "J. R. R. Tolkien"),
            (3, "Brent Weeks"),
        ]

    def test_books_in_order(self, store):
        """Test that the eight fixture books are loaded in order."""
        assert [b.id for b in store.books] == [1, 2, 3, 4, 5, 6, 7, 8]
        assert [b.author_id for b in store.books] == [1, 1, 1, 2, 2, 2, 3, 3]
        assert store.books[0].name == "Harry Porter and the Chamber of Secrets"
        assert store.books[-1].name == "Beyond the Shadows"

    def test_seeded_stores_are_isolated(self):
        """Test that mutating one seeded store does not affect another."""
        first = LibraryStore.seeded()
        second = LibraryStore.seeded()

        first.update_author(1, "Changed")
        first.delete_book(1)

        assert second.find_author(1).name == "J. K. Rowling"
        assert len(second.books) == len(SEED_BOOKS)
        assert len(second.authors) == len(SEED_AUTHORS)

    def test_empty_store(self):
        """Test that a store can start with no records."""
        store = LibraryStore()
        assert store.authors == []
        assert store.books == []
        assert store.add_author("First").id == 1


class TestLookups:
    """Tests for find and relation lookups."""

    def test_find_author(self, store):
        """Test finding an author by id."""
        assert store.find_author(2) == AuthorRecord(id=2, name="J. R. R. Tolkien")

    def test_find_book(self, store):
        """Test finding a book by id."""
        assert store.find_book(5) == BookRecord(id=5, name="The Two Towers", author_id=2)

    def test_find_missing_returns_none(self, store):
        """Test that unknown ids are not-found rather than errors."""
        assert store.find_author(999) is None
        assert store.find_book(999) is None

    def test_find_none_matches_nothing(self, store):
        """Test that an omitted id matches nothing."""
        assert store.find_author(None) is None
        assert store.find_book(None) is None

    def test_books_by_author(self, store):
        """Test that an author's books come back in collection order."""
        assert [b.id for b in store.books_by_author(2)] == [4, 5, 6]

    def test_books_by_author_without_books(self, store):
        """Test that an author with no books gets an empty list."""
        author = store.add_author("Unpublished")
        assert store.books_by_author(author.id) == []

    def test_first_match_wins(self, length_store):
        """Test that duplicate ids resolve to the earliest record."""
        length_store.delete_book(1)
        duplicate = length_store.add_book("Duplicate", 3)

        assert duplicate.id == 8
        assert length_store.find_book(8).name == "Beyond the Shadows"


class TestAuthorMutations:
    """Tests for adding, updating and deleting authors."""

    def test_add_author(self, store):
        """Test that a new author is appended with the next id."""
        author = store.add_author("Ursula K. Le Guin")

        assert author == AuthorRecord(id=4, name="Ursula K. Le Guin")
        assert store.authors[-1] is author

    def test_update_author_in_place(self, store):
        """Test that update overwrites the existing record."""
        original = store.find_author(3)
        updated = store.update_author(3, "B. Weeks")

        assert updated is original
        assert store.find_author(3).name == "B. Weeks"

    def test_update_missing_author_raises(self, store):
        """Test that updating an unknown author raises NotFoundError."""
        with pytest.raises(NotFoundError) as exc_info:
            store.update_author(999, "Ghost")

        assert exc_info.value.entity == "Author"
        assert exc_info.value.entity_id == 999
        assert str(exc_info.value) == "Author 999 not found"
        assert [a.name for a in store.authors] == [name for _, name in SEED_AUTHORS]

    def test_delete_author(self, store):
        """Test that delete returns the remaining authors."""
        remaining = store.delete_author(2)
        assert [a.id for a in remaining] == [1, 3]

    def test_delete_author_leaves_books(self, store):
        """Test that deleting an author does not cascade to books."""
        store.delete_author(1)

        assert len(store.books) == len(SEED_BOOKS)
        assert store.find_author(store.find_book(1).author_id) is None

    def test_delete_missing_author_is_noop(self, store, caplog):
        """Test that deleting an unknown author changes nothing and logs a warning."""
        with caplog.at_level(logging.WARNING):
            remaining = store.delete_author(999)

        assert [a.id for a in remaining] == [1, 2, 3]
        assert "author 999 does not exist" in caplog.text


class TestBookMutations:
    """Tests for adding, updating and deleting books."""

    def test_add_book(self, store):
        """Test that a new book is appended with the next id."""
        book = store.add_book("Shadow's Edge", 3)

        assert book == BookRecord(id=9, name="Shadow's Edge", author_id=3)
        assert store.books[-1] is book

    def test_add_book_with_dangling_author(self, store):
        """Test that authorId is not validated."""
        book = store.add_book("Orphan", 42)
        assert store.find_author(book.author_id) is None

    def test_update_book_in_place(self, store):
        """Test that update changes only the matching record."""
        before = [(b.id, b.name, b.author_id) for b in store.books]

        updated = store.update_book(1, name="X", author_id=2)

        assert (updated.id, updated.name, updated.author_id) == (1, "X", 2)
        after = [(b.id, b.name, b.author_id) for b in store.books]
        assert after[0] == (1, "X", 2)
        assert after[1:] == before[1:]

    def test_update_missing_book_raises(self, store):
        """Test that updating an unknown book raises NotFoundError."""
        with pytest.raises(NotFoundError, match="Book 999 not found"):
            store.update_book(999, name="X", author_id=1)

    def test_delete_book(self, store):
        """Test that delete returns the other seven books in order."""
        remaining = store.delete_book(1)
        assert [b.id for b in remaining] == [2, 3, 4, 5, 6, 7, 8]
        assert store.books == remaining

    def test_delete_missing_book_is_noop(self, store):
        """Test that deleting an unknown book returns the unchanged collection."""
        remaining = store.delete_book(999)
        assert [b.id for b in remaining] == [1, 2, 3, 4, 5, 6, 7, 8]

    def test_mutations_log(self, store, caplog):
        """Test that mutations are logged at info level."""
        with caplog.at_level(logging.INFO):
            store.add_book("Shadow's Edge", 3)
            store.delete_book(9)

        assert "Added book 9" in caplog.text
        assert "Deleted book 9" in caplog.text


class TestIdAssignment:
    """Tests for the id assignment strategies."""

    def test_counter_never_reuses_ids(self, store):
        """Test that add, delete, add yields distinct ids under the counter."""
        first = store.add_book("First", 1)
        store.delete_book(first.id)
        second = store.add_book("Second", 1)

        assert first.id == 9
        assert second.id == 10
        ids = [b.id for b in store.books]
        assert len(ids) == len(set(ids))

    def test_counter_after_deleting_seeded_record(self, store):
        """Test that deleting a seeded record does not free its id."""
        store.delete_author(2)
        assert store.add_author("New").id == 4

    def test_length_reproduces_duplicate_ids(self, length_store):
        """Test that length + 1 ids collide after a deletion."""
        first = length_store.add_book("First", 1)
        length_store.delete_book(1)
        second = length_store.add_book("Second", 1)

        assert first.id == 9
        assert second.id == 9
        assert [b.id for b in length_store.books].count(9) == 2

    def test_strategy_accepts_string(self):
        """Test that the strategy can be given by its string value."""
        store = LibraryStore.seeded(id_strategy="length")
        assert store.id_strategy is IdStrategy.LENGTH

    def test_unknown_strategy_rejected(self):
        """Test that an unknown strategy name raises ValueError."""
        with pytest.raises(ValueError):
            LibraryStore(id_strategy="random")
