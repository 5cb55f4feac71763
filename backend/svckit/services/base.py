"""
svckit: Abstract Service Interfaces
======================================

What:  Abstract base classes defining the two domain capabilities.
How:   Concrete implementations inherit and implement every method.
       Endpoints depend only on these interfaces, so a different catalog
       (for example one backed by a database) can be swapped in without
       touching endpoints or transport bindings.
Who:   Implemented in string_service.py and book_service.py; consumed by
       svckit.endpoints.
"""

from abc import ABC, abstractmethod
from typing import Dict

from svckit.schemas.books import Book


class StringService(ABC):
    """
    Operations on strings.

    Contract:
        - uppercase() raises EmptyInputError for ""
        - count() never fails
    """

    @abstractmethod
    def uppercase(self, text: str) -> str:
        """
        Convert text to upper case.

        Raises:
            EmptyInputError: When `text` is the empty string.
        """
        ...

    @abstractmethod
    def count(self, text: str) -> int:
        """Return the length of `text` in UTF-8 code units."""
        ...


class CatalogService(ABC):
    """
    A catalog of books keyed by book ID.

    Contract:
        - list_books() returns a snapshot the caller may keep; never fails
        - get_book() returns the stored Book; a miss either yields Book()
          or raises NotFoundError, depending on the implementation
        - put_book() inserts or overwrites by book.id (last writer wins)
        - Errors raised are SvcKitError subclasses
    """

    @abstractmethod
    def list_books(self) -> Dict[str, Book]:
        ...

    @abstractmethod
    def get_book(self, book_id: int) -> Book:
        ...

    @abstractmethod
    def put_book(self, book: Book) -> None:
        ...
