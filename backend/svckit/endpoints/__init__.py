# Endpoints package init
"""
svckit: Endpoints (Call Units)
=================================

One factory per operation. Each returns an Endpoint bound to a service:

    - strings.py:  make_uppercase_endpoint, make_count_endpoint
    - books.py:    make_books_endpoint, make_book_endpoint, make_set_book_endpoint
    - base.py:     Endpoint / Middleware types, logging_middleware

Endpoints are synchronous and transport-agnostic; they can be called
directly with a request model, which is how the unit tests use them.
"""
