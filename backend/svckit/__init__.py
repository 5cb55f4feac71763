"""
svckit: Application Package Initializer
==========================================

What: Marks the `svckit` directory as a Python package.
Who:  Imported by uvicorn (`svckit.main:app`), pytest, and `python -m svckit`.

Architecture Note:
    Every operation passes through the same three layers:

    ┌─────────────────────────────────────┐
    │   Transport (HTTP decode/encode)    │  ← svckit.transport, svckit.routes
    ├─────────────────────────────────────┤
    │     Endpoints (call units)          │  ← svckit.endpoints
    ├─────────────────────────────────────┤
    │     Services (business logic)       │  ← svckit.services
    └─────────────────────────────────────┘

    - Services raise domain exceptions and know nothing about HTTP
    - Endpoints turn one request model into one response model; domain
      errors are copied into the response's `err` field
    - Transport servers read the body, decode it, run the endpoint and
      encode the response; only a malformed body fails the request
"""

__version__ = "1.0.0"
