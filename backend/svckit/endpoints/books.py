"""
svckit: Catalog Endpoints
============================

What:  Call units for the CatalogService: ListBooks, GetBook and PutBook.
How:   Each factory closes over the service instance it was given.
       Catalog failures (NotFoundError in strict lookup mode, or any
       SvcKitError from another CatalogService) are returned as `err`.
"""

import logging

from svckit.endpoints.base import Endpoint
from svckit.exceptions import SvcKitError
from svckit.schemas.books import (
    Book,
    BooksRequest,
    BooksResponse,
    GetBookRequest,
    GetBookResponse,
    SetBookRequest,
    SetBookResponse,
)
from svckit.services.base import CatalogService

logger = logging.getLogger(__name__)


def make_books_endpoint(svc: CatalogService) -> Endpoint:
    def list_books(request: BooksRequest) -> BooksResponse:
        return BooksResponse(books=svc.list_books())

    return list_books


def make_book_endpoint(svc: CatalogService) -> Endpoint:
    def get_book(request: GetBookRequest) -> GetBookResponse:
        try:
            book = svc.get_book(request.id)
        except SvcKitError as e:
            logger.info("Book lookup failed: %s", e.message)
            return GetBookResponse(book=Book(), err=e.message)
        return GetBookResponse(book=book)

    return get_book


def make_set_book_endpoint(svc: CatalogService) -> Endpoint:
    def set_book(request: SetBookRequest) -> SetBookResponse:
        try:
            svc.put_book(request.book)
        except SvcKitError as e:
            logger.warning("Book %d not stored: %s", request.book.id, e.message)
            return SetBookResponse(ok=False, err=e.message)
        return SetBookResponse(ok=True)

    return set_book
