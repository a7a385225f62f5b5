"""In-memory store holding the authors and books collections.

Both collections are plain lists kept in insertion order. Every lookup is a
linear scan, so results always reflect the current state of the lists and
nothing is cached between calls.
"""

from common.logger import get_logger

from .seed import seed_authors, seed_books
from .types import AuthorRecord, BookRecord, IdStrategy, NotFoundError

logger = get_logger(__name__)


class LibraryStore:
    """Owned container for the two collections and their id counters.

    Attributes:
        authors: Author records in insertion order
        books: Book records in insertion order
        id_strategy: How ids for new records are assigned
    """

    def __init__(
        self,
        authors: list[AuthorRecord] | None = None,
        books: list[BookRecord] | None = None,
        id_strategy: IdStrategy | str = IdStrategy.COUNTER,
    ):
        self.authors: list[AuthorRecord] = list(authors or [])
        self.books: list[BookRecord] = list(books or [])
        self.id_strategy = IdStrategy(id_strategy)

        # Counters start after the highest id already present
        self._next_author_id = max((a.id for a in self.authors), default=0) + 1
        self._next_book_id = max((b.id for b in self.books), default=0) + 1

    @classmethod
    def seeded(cls, id_strategy: IdStrategy | str = IdStrategy.COUNTER) -> "LibraryStore":
        """Create a store pre-loaded with the fixture authors and books."""
        store = cls(authors=seed_authors(), books=seed_books(), id_strategy=id_strategy)
        logger.debug(
            f"Seeded store with {len(store.authors)} authors and {len(store.books)} books"
        )
        return store

    # Lookups

    def find_author(self, author_id: int | None) -> AuthorRecord | None:
        """Return the first author with ``author_id``, or None."""
        if author_id is None:
            return None
        return next((a for a in self.authors if a.id == author_id), None)

    def find_book(self, book_id: int | None) -> BookRecord | None:
        """Return the first book with ``book_id``, or None."""
        if book_id is None:
            return None
        return next((b for b in self.books if b.id == book_id), None)

    def books_by_author(self, author_id: int) -> list[BookRecord]:
        """Return every book whose ``author_id`` matches, in collection order."""
        return [b for b in self.books if b.author_id == author_id]

    # Id assignment

    def _new_author_id(self) -> int:
        if self.id_strategy is IdStrategy.LENGTH:
            return len(self.authors) + 1
        author_id = self._next_author_id
        self._next_author_id += 1
        return author_id

    def _new_book_id(self) -> int:
        if self.id_strategy is IdStrategy.LENGTH:
            return len(self.books) + 1
        book_id = self._next_book_id
        self._next_book_id += 1
        return book_id

    # Authors

    def add_author(self, name: str) -> AuthorRecord:
        """Append a new author and return it."""
        author = AuthorRecord(id=self._new_author_id(), name=name)
        self.authors.append(author)
        logger.info(f"Added author {author.id}: {author.name}")
        return author

    def update_author(self, author_id: int, name: str) -> AuthorRecord:
        """Overwrite the name of an existing author in place.

        Raises:
            NotFoundError: If no author has ``author_id``
        """
        author = self.find_author(author_id)
        if author is None:
            raise NotFoundError("Author", author_id)

        author.name = name
        logger.info(f"Updated author {author.id}")
        return author

    def delete_author(self, author_id: int) -> list[AuthorRecord]:
        """Remove the author with ``author_id`` if present.

        Books written by the author are left in place. A missing id is
        ignored.

        Returns:
            The remaining authors
        """
        if self.find_author(author_id) is None:
            logger.warning(f"Delete ignored: author {author_id} does not exist")
            return self.authors

        self.authors = [a for a in self.authors if a.id != author_id]
        logger.info(f"Deleted author {author_id}")
        return self.authors

    # Books

    def add_book(self, name: str, author_id: int) -> BookRecord:
        """Append a new book and return it. ``author_id`` is not checked."""
        book = BookRecord(id=self._new_book_id(), name=name, author_id=author_id)
        self.books.append(book)
        logger.info(f"Added book {book.id}: {book.name}")
        return book

    def update_book(self, book_id: int, name: str, author_id: int) -> BookRecord:
        """Overwrite both fields of an existing book in place.

        Raises:
            NotFoundError: If no book has ``book_id``
        """
        book = self.find_book(book_id)
        if book is None:
            raise NotFoundError("Book", book_id)

        book.name = name
        book.author_id = author_id
        logger.info(f"Updated book {book.id}")
        return book

    def delete_book(self, book_id: int) -> list[BookRecord]:
        """Remove the book with ``book_id`` if present.

        Returns:
            The remaining books
        """
        if self.find_book(book_id) is None:
            logger.warning(f"Delete ignored: book {book_id} does not exist")
            return self.books

        self.books = [b for b in self.books if b.id != book_id]
        logger.info(f"Deleted book {book_id}")
        return self.books
