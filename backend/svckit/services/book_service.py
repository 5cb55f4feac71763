"""
svckit: Book Catalog Service
===============================

What:  In-memory book catalog and the CatalogService built on it.
How:   Catalog owns a dict of str(book.id) → Book behind a re-entrant lock.
       Every read and write takes the lock; list snapshots are copies.
Who:   Constructed once by create_app(), seeded there, and handed to the
       catalog endpoints.
When:  Lives for the lifetime of the process; nothing is persisted.

Seeding:
    Catalog.seed() runs once at application construction and only fills
    an empty catalog. Reads never populate the catalog.
"""

import logging
import threading
from typing import Dict, Iterable, Optional

from svckit.exceptions import NotFoundError
from svckit.schemas.books import Book
from svckit.services.base import CatalogService

logger = logging.getLogger(__name__)


SEED_BOOKS = (
    Book(
        id=1,
        title="A Spell for Chameleon",
        author="Piers Anthony",
        date="1977",
        publisher=" Del Rey ",
    ),
    Book(
        id=2,
        title="The Source of Magic",
        author="Piers Anthony",
        date="1979",
        publisher=" Del Rey ",
    ),
)


class Catalog:
    """
    Thread-safe mapping from stringified book ID to Book.

    Attributes:
        _books: Backing dict, never None
        _lock:  Guards every access to _books
    """

    def __init__(self) -> None:
        self._books: Dict[str, Book] = {}
        self._lock = threading.RLock()

    @staticmethod
    def key(book_id: int) -> str:
        return str(book_id)

    def seed(self, books: Iterable[Book] = SEED_BOOKS) -> bool:
        """
        Populate the catalog if and only if it is empty.

        Returns:
            True when the seed books were inserted, False when the catalog
            already held data and was left untouched.
        """
        with self._lock:
            if self._books:
                logger.debug("Catalog already holds %d books; seed skipped", len(self._books))
                return False
            for book in books:
                self._books[self.key(book.id)] = book.model_copy()
            logger.info("Init books: catalog seeded with %d books", len(self._books))
            return True

    def snapshot(self) -> Dict[str, Book]:
        with self._lock:
            return dict(self._books)

    def get(self, book_id: int) -> Optional[Book]:
        with self._lock:
            return self._books.get(self.key(book_id))

    def put(self, book: Book) -> None:
        with self._lock:
            self._books[self.key(book.id)] = book.model_copy()

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)


class InMemoryCatalogService(CatalogService):
    """
    CatalogService over an in-memory Catalog.

    Args:
        catalog:        The catalog to serve; shared with the caller.
        strict_lookup:  When True, get_book() raises NotFoundError for an
                        unknown ID. When False (default), it returns Book().
    """

    def __init__(self, catalog: Catalog, strict_lookup: bool = False) -> None:
        self.catalog = catalog
        self.strict_lookup = strict_lookup

    def list_books(self) -> Dict[str, Book]:
        return self.catalog.snapshot()

    def get_book(self, book_id: int) -> Book:
        book = self.catalog.get(book_id)
        if book is not None:
            return book
        if self.strict_lookup:
            raise NotFoundError(resource="book", resource_id=Catalog.key(book_id))
        logger.debug("Book %d not in catalog; returning empty book", book_id)
        return Book()

    def put_book(self, book: Book) -> None:
        self.catalog.put(book)
        logger.info("Stored book %d (%s)", book.id, book.title)
