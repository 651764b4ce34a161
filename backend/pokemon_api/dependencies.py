"""
Pokemon API — Request Dependencies
===================================

What:  FastAPI dependencies that hand route handlers the store and service
       built by `create_app()`.
Why:   The store and service live on `app.state`, not in module globals, so
       each app instance (one per test, one per server) works on its own file.

Example usage in a route:
    @router.get("/pokemons/{pokemon_id}")
    async def get_pokemon(service: PokemonService = Depends(get_pokemon_service)):
        ...
"""

from fastapi import Request

from pokemon_api.services.pokemon_service import PokemonService
from pokemon_api.storage import PokemonStore


def get_pokemon_store(request: Request) -> PokemonStore:
    """The collection store attached to the running app."""
    return request.app.state.pokemon_store


def get_pokemon_service(request: Request) -> PokemonService:
    """The PokemonService attached to the running app."""
    return request.app.state.pokemon_service
