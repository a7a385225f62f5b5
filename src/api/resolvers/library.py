"""Query and mutation resolvers for authors and books."""

import strawberry
from graphql import GraphQLError
from strawberry.types import Info

from api.context import get_store_from_info
from api.types import Author, Book
from common.logger import get_logger
from store import NotFoundError

logger = get_logger(__name__)


def _not_found(exc: NotFoundError) -> GraphQLError:
    return GraphQLError(
        str(exc),
        extensions={"code": "NOT_FOUND", "entity": exc.entity, "id": exc.entity_id},
    )


@strawberry.type(description="Root Query")
class Query:
    """GraphQL queries for the library API."""

    @strawberry.field(description="A Single Book")
    def book(self, info: Info, id: int | None = None) -> Book | None:
        """
        Get a single book by ID.

        Args:
            id: Book ID. When omitted, nothing matches.

        Returns:
            Book or None if not found
        """
        record = get_store_from_info(info).find_book(id)
        return Book.from_record(record) if record else None

    @strawberry.field(description="List of All Books")
    def books(self, info: Info) -> list[Book]:
        return [Book.from_record(r) for r in get_store_from_info(info).books]

    @strawberry.field(description="A Single Author")
    def author(self, info: Info, id: int | None = None) -> Author | None:
        """
        Get a single author by ID.

        Args:
            id: Author ID. When omitted, nothing matches.

        Returns:
            Author or None if not found
        """
        record = get_store_from_info(info).find_author(id)
        return Author.from_record(record) if record else None

    @strawberry.field(description="List of All Authors")
    def authors(self, info: Info) -> list[Author]:
        return [Author.from_record(r) for r in get_store_from_info(info).authors]


@strawberry.type(description="Root Mutation")
class Mutation:
    """GraphQL mutations. Each returns the post-mutation state."""

    @strawberry.mutation(description="Add a Book")
    def add_book(self, info: Info, name: str, author_id: int) -> Book:
        record = get_store_from_info(info).add_book(name=name, author_id=author_id)
        return Book.from_record(record)

    @strawberry.mutation(description="Update a Book")
    def update_book(self, info: Info, id: int, name: str, author_id: int) -> Book:
        """
        Overwrite the name and author of an existing book.

        Raises:
            GraphQLError: With code NOT_FOUND if no book has this id
        """
        try:
            record = get_store_from_info(info).update_book(id, name=name, author_id=author_id)
        except NotFoundError as e:
            logger.warning(f"Update rejected: {e}")
            raise _not_found(e) from e
        return Book.from_record(record)

    @strawberry.mutation(description="Delete a Book")
    def delete_book(self, info: Info, id: int) -> list[Book]:
        return [Book.from_record(r) for r in get_store_from_info(info).delete_book(id)]

    @strawberry.mutation(description="Add an Author")
    def add_author(self, info: Info, name: str) -> Author:
        record = get_store_from_info(info).add_author(name=name)
        return Author.from_record(record)

    @strawberry.mutation(description="Update an Author")
    def update_author(self, info: Info, id: int, name: str) -> Author:
        """
        Rename an existing author.

        Raises:
            GraphQLError: With code NOT_FOUND if no author has this id
        """
        try:
            record = get_store_from_info(info).update_author(id, name=name)
        except NotFoundError as e:
            logger.warning(f"Update rejected: {e}")
            raise _not_found(e) from e
        return Author.from_record(record)

    @strawberry.mutation(description="Delete an Author")
    def delete_author(self, info: Info, id: int) -> list[Author]:
        return [Author.from_record(r) for r in get_store_from_info(info).delete_author(id)]
