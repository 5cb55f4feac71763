# Schemas package init
"""
svckit: Wire Schemas
=======================

Schema Inventory:
    - base.py:     KitModel (case-insensitive keys, alias output)
    - strings.py:  /uppercase and /count bodies
    - books.py:    Book plus /books, /book and /setbook bodies
    - common.py:   ErrorResponse, HealthResponse
"""
