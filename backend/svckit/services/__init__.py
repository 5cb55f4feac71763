# Services package init
"""
svckit: Services Layer
=========================

What:  Business logic behind abstract capability interfaces.
How:   Services take plain values, apply the domain rules, and raise
       SvcKitError subclasses on failure. They never see HTTP.

Service Inventory:
    - StringService (abstract): uppercase, count
    - BasicStringService: the default StringService
    - CatalogService (abstract): list_books, get_book, put_book
    - InMemoryCatalogService: CatalogService over a locked in-memory Catalog
"""
