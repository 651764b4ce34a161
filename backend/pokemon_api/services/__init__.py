# Services package init
"""
Pokemon API — Services Layer
=============================

What:  Business logic sitting between routes (HTTP) and storage (the JSON file).
How:   PokemonService receives its PokemonStore at construction and is handed
       to routes through FastAPI's dependency injection.

Service Inventory:
    - PokemonService: list, search, get, create, update, delete
"""
