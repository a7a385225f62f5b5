"""Cross-reference resolvers between books and authors.

Each resolver takes the store and the parent entity and performs a fresh
scan, so nested fields always see the store's current contents.
"""

from typing import Protocol

from store import AuthorRecord, BookRecord, LibraryStore


class HasAuthorId(Protocol):
    author_id: int


class HasId(Protocol):
    id: int


def resolve_author(store: LibraryStore, book: HasAuthorId) -> AuthorRecord | None:
    """Return the author a book points at, or None for a dangling authorId."""
    return store.find_author(book.author_id)


def resolve_books(store: LibraryStore, author: HasId) -> list[BookRecord]:
    """Return every book written by ``author``, in collection order."""
    return store.books_by_author(author.id)
