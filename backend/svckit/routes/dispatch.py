"""
svckit: Dispatch Table
=========================

What:  Maps each externally visible route to its transport binding.
How:   build_dispatch_table() wires service → endpoint → HTTPServer for
       every operation and freezes the result. mount_dispatch_table()
       registers each entry as a POST route on the FastAPI app.
When:  Both run once inside create_app(); the table never changes afterwards.

Route Inventory:
    POST /uppercase   {"s": str}      → {"v": str, "err": str}
    POST /count       {"s": str}      → {"v": int}
    POST /books       {}              → {"books": {id: Book}}
    POST /book        {"id": int}     → {"book": Book}
    POST /setbook     {"book": Book}  → {"ok": bool}
"""

from types import MappingProxyType
from typing import Mapping

from fastapi import FastAPI

from svckit.endpoints.base import logging_middleware
from svckit.endpoints.books import (
    make_book_endpoint,
    make_books_endpoint,
    make_set_book_endpoint,
)
from svckit.endpoints.strings import make_count_endpoint, make_uppercase_endpoint
from svckit.schemas.books import BooksRequest, GetBookRequest, SetBookRequest
from svckit.schemas.common import ErrorResponse
from svckit.schemas.strings import CountRequest, UppercaseRequest
from svckit.services.base import CatalogService, StringService
from svckit.transport.http import HTTPServer, decode_json_request


def build_dispatch_table(
    string_service: StringService,
    catalog_service: CatalogService,
) -> Mapping[str, HTTPServer]:
    """
    Build the read-only route → HTTPServer table.

    Every endpoint is wrapped in logging_middleware before it is bound
    to its transport.
    """
    bindings = [
        ("/uppercase", "uppercase", make_uppercase_endpoint(string_service), UppercaseRequest),
        ("/count", "count", make_count_endpoint(string_service), CountRequest),
        ("/books", "books", make_books_endpoint(catalog_service), BooksRequest),
        ("/book", "book", make_book_endpoint(catalog_service), GetBookRequest),
        ("/setbook", "setbook", make_set_book_endpoint(catalog_service), SetBookRequest),
    ]

    table = {}
    for path, name, endpoint, request_model in bindings:
        table[path] = HTTPServer(
            endpoint=logging_middleware(name)(endpoint),
            decode=decode_json_request(request_model),
            name=name,
        )
    return MappingProxyType(table)


def mount_dispatch_table(app: FastAPI, table: Mapping[str, HTTPServer]) -> None:
    """Register every table entry as a POST route on `app`."""
    for path, server in table.items():
        app.add_api_route(
            path,
            server.handle,
            methods=["POST"],
            name=server.name,
            response_model=None,
            responses={400: {"description": "Malformed request body", "model": ErrorResponse}},
            tags=["RPC"],
        )
