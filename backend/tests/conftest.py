"""
Pokemon API — Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   Each test gets its own temporary collection file, so tests never touch
       `data/pokemons.json` and never see each other's writes.

Fixture Hierarchy (all function-scoped):
    sample_pokemons ─▶ data_file ─▶ store ─▶ service
                                 └▶ test_settings ─▶ test_app ─▶ test_client
    make_pokemons: factory for larger generated collections
"""

import json
import os
import tempfile

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Set BEFORE any pokemon_api import: `pokemon_api.main` builds a default app
# at import time and must not point at the real collection
os.environ["DATA_FILE"] = os.path.join(
    tempfile.mkdtemp(prefix="pokemon_api_test_"), "pokemons.json"
)
os.environ["LOG_LEVEL"] = "WARNING"

from pokemon_api.config import Settings  # noqa: E402
from pokemon_api.services.pokemon_service import PokemonService  # noqa: E402
from pokemon_api.storage import PokemonStore  # noqa: E402


def write_collection(path, records):
    """Write records the same way the store does (2-space indent, raw UTF-8)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(records, indent=2, ensure_ascii=False), encoding="utf-8")


# ══════════════════════════════════════════════════════════════════════════
# Data Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def sample_pokemons():
    """Three records with ids 1, 2, 3."""
    return [
        {
            "id": 1,
            "name": {"english": "Bulbasaur", "japanese": "フシギダネ", "french": "Bulbizarre"},
            "type": ["Grass", "Poison"],
            "base": {"HP": 45, "Attack": 49, "Defense": 49, "Speed": 45},
        },
        {
            "id": 2,
            "name": {"english": "Ivysaur", "japanese": "フシギソウ", "french": "Herbizarre"},
            "type": ["Grass", "Poison"],
            "base": {"HP": 60, "Attack": 62, "Defense": 63, "Speed": 60},
        },
        {
            "id": 3,
            "name": {"english": "Charmander", "japanese": "ヒトカゲ", "french": "Salamèche"},
            "type": ["Fire"],
            "base": {"HP": 39, "Attack": 52, "Defense": 43, "Speed": 65},
            "species": "Lizard Pokémon",
        },
    ]


@pytest.fixture
def make_pokemons():
    """
    Factory for generated collections.

    Usage:
        records = make_pokemons(45)  # ids 1..45
    """
    def _make(count):
        return [
            {
                "id": i,
                "name": {"english": f"Mon{i}", "french": f"Mon{i}", "japanese": f"モン{i}"},
                "type": ["Normal"],
                "base": {"HP": i},
            }
            for i in range(1, count + 1)
        ]
    return _make


@pytest.fixture
def data_file(tmp_path, sample_pokemons):
    """Temporary collection file pre-filled with `sample_pokemons`."""
    path = tmp_path / "data" / "pokemons.json"
    write_collection(path, sample_pokemons)
    return path


# ══════════════════════════════════════════════════════════════════════════
# Service Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def store(data_file):
    return PokemonStore(data_file)


@pytest.fixture
def service(store):
    return PokemonService(store)


# ══════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def test_settings(tmp_path, data_file):
    """Settings pointing at the temporary collection; static files from tmp_path."""
    return Settings(
        data_file=str(data_file),
        static_root=str(tmp_path),
        log_level="WARNING",
    )


@pytest.fixture
def test_app(test_settings):
    from pokemon_api.main import create_app
    return create_app(test_settings)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient routed straight into the app (no server).

    Usage:
        async def test_banner(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
