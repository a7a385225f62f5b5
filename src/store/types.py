"""Record types and exceptions for the in-memory library store."""

from dataclasses import dataclass
from enum import Enum


class IdStrategy(str, Enum):
    """How new record ids are assigned."""

    COUNTER = "counter"
    LENGTH = "length"


@dataclass
class AuthorRecord:
    """An author row owned by the store."""

    id: int
    name: str


@dataclass
class BookRecord:
    """A book row owned by the store.

    ``author_id`` is not checked against the authors collection, so it may
    point at an author that does not exist.
    """

    id: int
    name: str
    author_id: int


class LibraryError(Exception):
    """Base exception for store operations."""

    pass


class NotFoundError(LibraryError):
    """No record with the requested id exists."""

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")
