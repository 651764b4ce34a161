"""
Pokemon API — Banner & Health Check Routes
===========================================

What:  `GET /` plain-text banner and `GET /health` status check.
Who:   `/` is for humans checking the server is up; `/health` is for Docker
       health checks, load balancers and monitoring.

Status levels:
    - healthy:   collection file present
    - degraded:  collection file missing (reads return an empty collection,
                 the first write recreates it)
"""

import logging
import time

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from pokemon_api import __version__
from pokemon_api.dependencies import get_pokemon_store
from pokemon_api.schemas.pokemon import HealthResponse
from pokemon_api.storage import PokemonStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

BANNER = "Pokemon API Server is running. Use /api/pokemons endpoints."

# Module-level: set once on import, used for uptime reporting
_start_time = time.time()


@router.get("/", response_class=PlainTextResponse, summary="Server banner")
async def banner() -> str:
    return BANNER


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(store: PokemonStore = Depends(get_pokemon_store)) -> HealthResponse:
    """
    Report whether the collection file is reachable.

    Always answers 200; a missing file is reported as `degraded` rather than
    failing the check, since the service still serves (empty) reads.
    """
    storage_status = "available"
    overall = "healthy"

    if not store.exists():
        storage_status = "missing"
        overall = "degraded"
        logger.warning("Health check: collection file not found at %s", store.path)

    return HealthResponse(
        status=overall,
        version=__version__,
        storage=storage_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
