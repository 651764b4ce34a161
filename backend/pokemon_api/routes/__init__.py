# Routes package init
"""
Pokemon API — API Routes Package
=================================

Route Inventory:
    - pokemons.py:  /api/pokemons CRUD (list, search, get, create, update, delete)
    - health.py:    GET /        (plain-text banner)
                    GET /health  (service health check)

Routes stay thin: parse the request, call PokemonService, return the result.
"""
