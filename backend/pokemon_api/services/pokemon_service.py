"""
Pokemon API — Pokemon Service (Business Logic)
===============================================

What:  The six collection operations: list, search by name, get by id,
       create, update and delete.
Why:   Keeps the record rules (id assignment, presence checks, shallow merge)
       out of the HTTP layer so they can be tested without a server.
How:   Every call loads the full collection from PokemonStore, works on it
       in memory, and, for writes, saves the full collection back.
Who:   Called by route handlers through the `get_pokemon_service` dependency.

Operation Flow (writes):
    ┌──────────┐    ┌─────────────┐    ┌──────────────┐    ┌──────────┐
    │  Route   │───▶│  load()     │───▶│  mutate list │───▶│  save()  │
    └──────────┘    │  (full file)│    │  in memory   │    │(full file)│
                    └─────────────┘    └──────────────┘    └──────────┘

Design Decision:
    The service holds only its store. It keeps no records between calls,
    so two instances over the same file always agree with the disk.
"""

import logging
import math
import re
import sys
from typing import Any, Dict, List, Optional

from pokemon_api.exceptions import NotFoundError, PersistenceError, ValidationError
from pokemon_api.schemas.pokemon import DeleteResponse, PokemonListResponse
from pokemon_api.storage import PokemonStore, Record

logger = logging.getLogger(__name__)

# Records per page for GET /api/pokemons
PAGE_SIZE = 20

REQUIRED_FIELDS = ("name", "type", "base")
NAME_FIELDS = ("english", "french", "japanese")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_digits(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    return match.group(1) if match else None


def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Parse the leading integer of a string, ignoring anything after it.

    "12" → 12, " 7abc" → 7, "3.9" → 3, "abc" → None, None → None.
    Path ids go through this. A digit run too long for `int()` gives None,
    so such an id matches no record.
    """
    digits = _leading_digits(value)
    if digits is None:
        return None
    try:
        return int(digits)
    except ValueError:
        # Longer than the interpreter's int-string conversion limit
        return None


def parse_page(value: Optional[str]) -> Optional[int]:
    """
    Parse the `page` query parameter the same way as `parse_int`.

    A digit run too long for `int()` saturates to sys.maxsize (or its
    negative), which is still past the end of any collection.
    """
    digits = _leading_digits(value)
    if digits is None:
        return None
    try:
        return int(digits)
    except ValueError:
        return -sys.maxsize if digits.startswith("-") else sys.maxsize


def _is_blank(value: Any) -> bool:
    # null, "", 0 and false all count as missing
    return value is None or (not isinstance(value, (list, dict)) and value in ("", 0))


def _record_id(record: Record) -> Optional[int]:
    record_id = record.get("id")
    if isinstance(record_id, bool) or not isinstance(record_id, (int, float)):
        return None
    if isinstance(record_id, float) and not record_id.is_integer():
        return None
    return int(record_id)


def _name_matches(record: Record, needle: str) -> bool:
    name = record.get("name")
    if not isinstance(name, dict):
        return False
    for field in NAME_FIELDS:
        value = name.get(field)
        if isinstance(value, str) and needle in value.lower():
            return True
    return False


class PokemonService:
    """
    Business logic for the Pokemon collection.

    Responsibilities:
        - list_pokemons(): fixed-size offset pagination
        - search_by_name(): first case-insensitive substring match
        - get_pokemon(): lookup by id
        - create_pokemon(): presence check, id assignment, append
        - update_pokemon(): shallow merge, id pinned to the path value
        - delete_pokemon(): removal with confirmation message

    Error Handling Strategy:
        Missing records raise NotFoundError. Failed saves from the store are
        re-raised as PersistenceError carrying the per-operation message the
        API returns.
    """

    def __init__(self, store: PokemonStore):
        self.store = store

    async def list_pokemons(self, page: Optional[int] = None) -> PokemonListResponse:
        """
        Return one page of the collection.

        Args:
            page: 1-based page number. None or 0 falls back to page 1.
                  Pages past the end produce an empty list, not an error.

        Returns:
            PokemonListResponse with the page slice and pagination totals.
            `total_pages` is 0 for an empty collection.
        """
        pokemons = await self.store.load()
        page = page or 1
        start = (page - 1) * PAGE_SIZE
        end = start + PAGE_SIZE

        return PokemonListResponse(
            pokemons=pokemons[start:end],
            current_page=page,
            total_pages=math.ceil(len(pokemons) / PAGE_SIZE),
            total_pokemons=len(pokemons),
            limit=PAGE_SIZE,
        )

    async def search_by_name(self, query: str) -> Record:
        """
        Find the first record whose English, French or Japanese name contains `query`.

        Matching is case-insensitive and in collection order.

        Raises:
            NotFoundError: No name contains the query.
        """
        needle = query.lower()
        pokemons = await self.store.load()
        for pokemon in pokemons:
            if _name_matches(pokemon, needle):
                return pokemon
        raise NotFoundError(lookup=f"name:{query}")

    async def get_pokemon(self, pokemon_id: Optional[int]) -> Record:
        """
        Return the record with the given id.

        Raises:
            NotFoundError: No record has that id, or the id did not parse.
        """
        pokemons = await self.store.load()
        index = self._find_index(pokemons, pokemon_id)
        return pokemons[index]

    async def create_pokemon(self, payload: Dict[str, Any]) -> Record:
        """
        Append a new record with a store-assigned id.

        The new id is one past the highest existing integer id (1 for an
        empty collection). Any `id` in the payload is overwritten.

        Raises:
            ValidationError: `name`, `type` or `base` is missing or blank.
            PersistenceError: The collection could not be saved.
        """
        missing = [field for field in REQUIRED_FIELDS if _is_blank(payload.get(field))]
        if missing:
            raise ValidationError(fields=missing)

        pokemons = await self.store.load()
        max_id = max(
            (record_id for record_id in map(_record_id, pokemons) if record_id is not None),
            default=0,
        )

        new_pokemon = dict(payload)
        new_pokemon["id"] = max_id + 1
        pokemons.append(new_pokemon)

        await self._save(pokemons, "Error saving pokemon")
        logger.info("Created pokemon %d", new_pokemon["id"])
        return new_pokemon

    async def update_pokemon(self, pokemon_id: Optional[int], payload: Dict[str, Any]) -> Record:
        """
        Shallow-merge `payload` over an existing record.

        Top-level fields in the payload replace the stored ones wholesale;
        nested objects are not merged. The stored `id` always ends up equal
        to `pokemon_id`, whatever the payload says.

        Raises:
            NotFoundError: No record has that id.
            PersistenceError: The collection could not be saved.
        """
        pokemons = await self.store.load()
        index = self._find_index(pokemons, pokemon_id)

        updated = {**pokemons[index], **payload, "id": pokemon_id}
        pokemons[index] = updated

        await self._save(pokemons, "Error updating pokemon")
        logger.info("Updated pokemon %d", pokemon_id)
        return updated

    async def delete_pokemon(self, pokemon_id: Optional[int]) -> DeleteResponse:
        """
        Remove a record and return it with a confirmation message.

        Raises:
            NotFoundError: No record has that id.
            PersistenceError: The collection could not be saved.
        """
        pokemons = await self.store.load()
        index = self._find_index(pokemons, pokemon_id)

        deleted = pokemons.pop(index)

        await self._save(pokemons, "Error deleting pokemon")
        logger.info("Deleted pokemon %d", pokemon_id)
        return DeleteResponse(message="Pokemon deleted successfully", pokemon=deleted)

    @staticmethod
    def _find_index(pokemons: List[Record], pokemon_id: Optional[int]) -> int:
        if pokemon_id is not None:
            for index, pokemon in enumerate(pokemons):
                if _record_id(pokemon) == pokemon_id:
                    return index
        raise NotFoundError(lookup=f"id:{pokemon_id}")

    async def _save(self, pokemons: List[Record], message: str) -> None:
        try:
            await self.store.save(pokemons)
        except PersistenceError as e:
            raise PersistenceError(message=message, context=e.context) from e
