"""
Pokemon API — Pokemon Route Handlers
=====================================

What:  CRUD endpoints under /api/pokemons.
How:   Pull ids, pages and bodies out of the request, delegate to
       PokemonService, return JSON. Errors are raised as application
       exceptions and formatted by the global handlers in main.py.

Route Inventory:
    GET    /api/pokemons?page=N            → paginated list
    GET    /api/pokemons/search/{name}     → first name match
    GET    /api/pokemons/{pokemon_id}      → single record
    POST   /api/pokemons                   → create (201)
    PUT    /api/pokemons/{pokemon_id}      → shallow merge update
    DELETE /api/pokemons/{pokemon_id}      → remove

Id and page parsing:
    Path ids and `page` are taken as raw strings and parsed leniently
    (leading integer prefix). An id that does not parse simply matches no
    record and yields 404, never a 422 validation error.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query

from pokemon_api.dependencies import get_pokemon_service
from pokemon_api.schemas.pokemon import DeleteResponse, ErrorResponse, PokemonListResponse
from pokemon_api.services.pokemon_service import PokemonService, parse_int, parse_page

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Pokemons"])

NOT_FOUND = {404: {"description": "Pokemon not found", "model": ErrorResponse}}


@router.get(
    "/pokemons",
    response_model=PokemonListResponse,
    summary="List pokemons, 20 per page",
)
async def list_pokemons(
    page: Optional[str] = Query(
        default=None,
        description="1-based page number. Missing or non-numeric values mean page 1.",
    ),
    service: PokemonService = Depends(get_pokemon_service),
) -> PokemonListResponse:
    """
    Return one page of the collection.

    Out-of-range pages come back with an empty `pokemons` list and the
    usual totals, so clients can stop paging on an empty result.
    """
    return await service.list_pokemons(page=parse_page(page))


@router.get(
    "/pokemons/search/{name}",
    response_model=Dict[str, Any],
    responses=NOT_FOUND,
    summary="Find a pokemon by partial name",
    description=(
        "Case-insensitive substring match against the English, French and "
        "Japanese names. Returns the first match in collection order."
    ),
)
async def search_pokemon(
    name: str,
    service: PokemonService = Depends(get_pokemon_service),
) -> Dict[str, Any]:
    return await service.search_by_name(name)


@router.get(
    "/pokemons/{pokemon_id}",
    response_model=Dict[str, Any],
    responses=NOT_FOUND,
    summary="Get a pokemon by id",
)
async def get_pokemon(
    pokemon_id: str,
    service: PokemonService = Depends(get_pokemon_service),
) -> Dict[str, Any]:
    return await service.get_pokemon(parse_int(pokemon_id))


@router.post(
    "/pokemons",
    status_code=201,
    response_model=Dict[str, Any],
    responses={
        400: {"description": "Missing name, type or base", "model": ErrorResponse},
        500: {"description": "Collection could not be saved", "model": ErrorResponse},
    },
    summary="Create a pokemon",
    description=(
        "Requires `name`, `type` and `base`. The id is assigned by the server "
        "(highest existing id + 1); any id in the body is ignored."
    ),
)
async def create_pokemon(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: PokemonService = Depends(get_pokemon_service),
) -> Dict[str, Any]:
    """
    Create a pokemon from the request body.

    A missing body counts as an empty object, so it fails the required-field
    check with 400 rather than a framework validation error.
    """
    return await service.create_pokemon(payload or {})


@router.put(
    "/pokemons/{pokemon_id}",
    response_model=Dict[str, Any],
    responses={
        **NOT_FOUND,
        500: {"description": "Collection could not be saved", "model": ErrorResponse},
    },
    summary="Update a pokemon",
    description=(
        "Shallow merge: each top-level field in the body replaces the stored "
        "one. Nested objects are replaced, not merged. The id cannot change."
    ),
)
async def update_pokemon(
    pokemon_id: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: PokemonService = Depends(get_pokemon_service),
) -> Dict[str, Any]:
    return await service.update_pokemon(parse_int(pokemon_id), payload or {})


@router.delete(
    "/pokemons/{pokemon_id}",
    response_model=DeleteResponse,
    responses={
        **NOT_FOUND,
        500: {"description": "Collection could not be saved", "model": ErrorResponse},
    },
    summary="Delete a pokemon",
)
async def delete_pokemon(
    pokemon_id: str,
    service: PokemonService = Depends(get_pokemon_service),
) -> DeleteResponse:
    return await service.delete_pokemon(parse_int(pokemon_id))
