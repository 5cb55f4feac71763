"""
svckit: Service Unit Tests
=============================

What:  Tests for BasicStringService, Catalog and InMemoryCatalogService.
How:   Plain objects, no HTTP and no mocks.

What we test:
    ✅ uppercase / count results, including the empty-string error
    ✅ Seeding happens once and only into an empty catalog
    ✅ put_book overwrites by ID without growing the catalog
    ✅ Lookup miss: empty Book by default, NotFoundError in strict mode
    ✅ Concurrent writers all land
"""

import threading

import pytest

from svckit.exceptions import EmptyInputError, NotFoundError
from svckit.schemas.books import Book
from svckit.services.book_service import SEED_BOOKS, Catalog, InMemoryCatalogService


class TestStringService:
    """Tests for BasicStringService."""

    @pytest.mark.parametrize("text", ["abc", "Hello, World", "straße", "already UPPER"])
    def test_uppercase_non_empty(self, string_service, text):
        assert string_service.uppercase(text) == text.upper()

    def test_uppercase_empty_raises(self, string_service):
        with pytest.raises(EmptyInputError) as exc_info:
            string_service.uppercase("")
        assert exc_info.value.message == "empty string"

    @pytest.mark.parametrize(
        "text, expected",
        [("hello", 5), ("héllo", 6), ("日本語", 9), ("straße", 7)],
    )
    def test_count_is_utf8_length(self, string_service, text, expected):
        assert string_service.count(text) == expected

    def test_count_empty_is_zero(self, string_service):
        assert string_service.count("") == 0


class TestCatalogSeeding:
    """Tests for Catalog.seed()."""

    def test_fresh_catalog_is_empty(self):
        assert len(Catalog()) == 0

    def test_seed_inserts_two_books(self, catalog):
        books = catalog.snapshot()
        assert sorted(books) == ["1", "2"]
        assert books["1"].title == "A Spell for Chameleon"
        assert books["2"].title == "The Source of Magic"
        assert books["1"].publisher == " Del Rey "

    def test_seed_twice_does_not_duplicate(self, catalog):
        assert catalog.seed() is False
        assert len(catalog) == 2

    def test_seed_skipped_when_catalog_has_data(self):
        catalog = Catalog()
        catalog.put(Book(id=7, title="Castle Roogna"))
        assert catalog.seed() is False
        assert list(catalog.snapshot()) == ["7"]

    def test_seed_copies_books(self):
        catalog = Catalog()
        catalog.seed()
        catalog.snapshot()["1"].title = "changed"
        assert SEED_BOOKS[0].title == "A Spell for Chameleon"


class TestCatalogService:
    """Tests for InMemoryCatalogService."""

    def test_list_books_returns_seed(self, catalog_service):
        books = catalog_service.list_books()
        assert set(books) == {"1", "2"}

    def test_list_books_is_stable(self, catalog_service):
        first = catalog_service.list_books()
        second = catalog_service.list_books()
        assert first == second
        assert len(second) == 2

    def test_list_books_returns_copy(self, catalog_service):
        books = catalog_service.list_books()
        books["99"] = Book(id=99)
        assert "99" not in catalog_service.list_books()

    def test_put_then_list(self, catalog_service):
        book = Book(id=3, title="Castle Roogna", author="Piers Anthony", date="1979", publisher="Del Rey")
        catalog_service.put_book(book)
        books = catalog_service.list_books()
        assert books["3"] == book
        assert len(books) == 3

    def test_put_same_id_overwrites(self, catalog_service):
        catalog_service.put_book(Book(id=3, title="First"))
        catalog_service.put_book(Book(id=3, title="Second"))
        books = catalog_service.list_books()
        assert len(books) == 3
        assert books["3"].title == "Second"

    def test_get_existing_book(self, catalog_service):
        book = catalog_service.get_book(1)
        assert book.id == 1
        assert book.author == "Piers Anthony"

    def test_get_missing_book_returns_zero_value(self, catalog_service):
        assert catalog_service.get_book(42) == Book()

    def test_get_missing_book_strict_raises(self, catalog):
        service = InMemoryCatalogService(catalog, strict_lookup=True)
        with pytest.raises(NotFoundError) as exc_info:
            service.get_book(42)
        assert exc_info.value.message == "book with ID '42' was not found"

    def test_strict_lookup_still_finds_existing(self, catalog):
        service = InMemoryCatalogService(catalog, strict_lookup=True)
        assert service.get_book(2).title == "The Source of Magic"

    def test_concurrent_puts(self, catalog_service):
        def writer(start):
            for book_id in range(start, start + 50):
                catalog_service.put_book(Book(id=book_id, title=f"Book {book_id}"))

        threads = [threading.Thread(target=writer, args=(100 + i * 50,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(catalog_service.list_books()) == 2 + 8 * 50
