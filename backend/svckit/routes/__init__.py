# Routes package init
"""
svckit: API Routes Package
=============================

Route Inventory:
    - dispatch.py:  POST /uppercase, /count, /books, /book, /setbook
                    (built from the dispatch table)
    - health.py:    GET  /health

Routes stay thin: the RPC routes are HTTPServer bindings with no logic
of their own, and the health route only reads service state.
"""
