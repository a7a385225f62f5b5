"""GraphQL type definitions for the library API."""

import strawberry
from strawberry.types import Info

from api.context import get_store_from_info
from api.resolvers.relations import resolve_author, resolve_books
from store import AuthorRecord, BookRecord


@strawberry.type(description="This represents a book written by an author")
class Book:
    """Book entity. ``author_id`` may reference an author that no longer exists."""

    id: int
    name: str
    author_id: int

    @strawberry.field(description="The author of this book, or null if unknown")
    def author(self, info: Info) -> "Author | None":
        record = resolve_author(get_store_from_info(info), self)
        return Author.from_record(record) if record else None

    @classmethod
    def from_record(cls, record: BookRecord) -> "Book":
        return cls(id=record.id, name=record.name, author_id=record.author_id)


@strawberry.type(description="This represents an author of a book")
class Author:
    """Author entity."""

    id: int
    name: str

    @strawberry.field(description="Books written by this author")
    def books(self, info: Info) -> list[Book]:
        return [Book.from_record(r) for r in resolve_books(get_store_from_info(info), self)]

    @classmethod
    def from_record(cls, record: AuthorRecord) -> "Author":
        return cls(id=record.id, name=record.name)
