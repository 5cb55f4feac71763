"""
svckit: Book Catalog Schemas
===============================

What:  The Book record and the request/response bodies for the catalog routes.

Book JSON shape:
    {"ID": 1, "Title": "...", "Author": "...", "Date": "1977", "Publisher": "..."}

    Python attributes are snake_case (book.id, book.title); the capitalized
    names are aliases used on the wire. Every field defaults to its zero
    value, so Book() is the "empty" book returned for a catalog miss.

Optional `err` fields:
    GetBookResponse and SetBookResponse only carry `err` when the catalog
    reported a failure. The encoder drops None fields, so successful
    responses stay {"book": {...}} and {"ok": true}.
"""

from typing import Dict, Optional

from pydantic import Field

from svckit.schemas.base import KitModel


class Book(KitModel):
    id: int = Field(default=0, alias="ID", strict=True)
    title: str = Field(default="", alias="Title", strict=True)
    author: str = Field(default="", alias="Author", strict=True)
    date: str = Field(default="", alias="Date", strict=True, description="Publication date as text")
    publisher: str = Field(default="", alias="Publisher", strict=True)


class BooksRequest(KitModel):
    """POST /books takes an empty object."""


class BooksResponse(KitModel):
    books: Dict[str, Book] = Field(
        default_factory=dict,
        description="Full catalog keyed by the book ID as a string",
    )


class GetBookRequest(KitModel):
    id: int = Field(default=0, strict=True)


class GetBookResponse(KitModel):
    book: Book = Field(default_factory=Book)
    err: Optional[str] = Field(default=None, description="Set only when the lookup failed")


class SetBookRequest(KitModel):
    book: Book = Field(default_factory=Book)


class SetBookResponse(KitModel):
    ok: bool = Field(default=False)
    err: Optional[str] = Field(default=None, description="Set only when the write failed")
