"""
Pokemon API — Pydantic Response Schemas
========================================

What:  Pydantic models for the envelopes the API wraps around records.
Why:   Fixed response shapes, automatic serialization, and OpenAPI docs.

Design Decision:
    Records themselves stay plain dicts (`Dict[str, Any]`). Apart from `id`,
    their fields are passed through opaquely and clients may add fields of
    their own, so a strict record model would drop or reject data that must
    round-trip verbatim. Only the envelopes are modelled.

    Wire names are camelCase (`currentPage`, `totalPokemons`); Python
    attributes stay snake_case through field aliases.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class PokemonListResponse(BaseModel):
    """
    What:  One page of the collection plus pagination totals.
    Who:   Returned by GET /api/pokemons.

    Example:
        {
            "pokemons": [{"id": 1, ...}, ...],
            "currentPage": 1,
            "totalPages": 41,
            "totalPokemons": 809,
            "limit": 20
        }
    """
    pokemons: List[Dict[str, Any]] = Field(description="Records on this page, in collection order")
    current_page: int = Field(alias="currentPage", description="Requested page number")
    total_pages: int = Field(alias="totalPages", description="ceil(totalPokemons / limit); 0 when empty")
    total_pokemons: int = Field(alias="totalPokemons", description="Number of records in the collection")
    limit: int = Field(description="Page size (always 20)")

    model_config = {"populate_by_name": True}


class DeleteResponse(BaseModel):
    """Returned by DELETE /api/pokemons/{id}: confirmation plus the removed record."""
    message: str = Field(description="Human-readable confirmation")
    pokemon: Dict[str, Any] = Field(description="The record that was removed")


# ══════════════════════════════════════════════════════════════════════════
# Error / Ops Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error body shared by every failing endpoint.

    Example:
        {"error": "Pokemon not found"}
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring checks."""
    status: str = Field(description="Overall service status: healthy, degraded")
    version: str = Field(description="Application version")
    storage: str = Field(description="Collection file status: available, missing")
    uptime_seconds: float = Field(description="Seconds since service started")
