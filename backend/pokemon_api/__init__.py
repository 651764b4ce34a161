"""
Pokemon API — Application Package Initializer
==============================================

What: Marks the `pokemon_api` directory as a Python package.
Why:  Enables module imports like `from pokemon_api.config import Settings`.
Who:  Used by uvicorn (`pokemon_api.main:app`), the `pokemon-api` console
      script, and pytest.

Architecture Note:
    A thin CRUD service over one JSON file, still split into layers so each
    piece can be exercised on its own:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← path/query parsing, status codes
    ├─────────────────────────────────────┤
    │       Services (Business Logic)     │  ← list, search, create, merge, delete
    ├─────────────────────────────────────┤
    │        Schemas (API Contracts)      │  ← Pydantic response models
    ├─────────────────────────────────────┤
    │        Storage (Persistence)        │  ← whole-collection JSON load/save
    └─────────────────────────────────────┘

    Every request reloads the full collection from disk; every write
    rewrites it. Nothing is cached between requests.
"""

__version__ = "1.0.0"
