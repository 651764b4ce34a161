"""
Pokemon API — Collection Storage
=================================

What:  Loads and saves the whole Pokemon collection as one JSON file.
Why:   The file is the only source of truth. Every request reads it in full
       and every write replaces it in full, so there is no cache to go stale.
How:   Async file I/O through aiofiles; JSON via the standard library.
Who:   Constructed by `create_app()` and injected into PokemonService.

File Layout:
    data/pokemons.json
    [
      {
        "id": 1,
        "name": {"english": "Bulbasaur", "french": "Bulbizarre", "japanese": "フシギダネ"},
        "type": ["Grass", "Poison"],
        "base": {"HP": 45, ...}
      },
      ...
    ]

Failure Policy:
    - Read failures (missing file, bad JSON, not an array) are logged and
      the collection is treated as empty. Callers never see them.
    - Write failures are logged and raised as PersistenceError.

Concurrency:
    No lock is taken. Two overlapping writers both read the same snapshot
    and the later save wins.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import aiofiles

from pokemon_api.exceptions import PersistenceError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class PokemonStore:
    """
    Whole-collection persistence for Pokemon records.

    Lifecycle:
        Opened when the app is created. Each load()/save() opens and closes
        the file on its own, so there is nothing to tear down.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def exists(self) -> bool:
        """Whether the collection file is present on disk."""
        return self.path.is_file()

    async def load(self) -> List[Record]:
        """
        Read and parse the full collection.

        Returns:
            The records in file order, or an empty list when the file cannot
            be read or does not hold a JSON array.
        """
        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                data = await f.read()
            records = json.loads(data)
        except (OSError, ValueError) as e:
            logger.error("Error reading pokemons from %s: %s", self.path, e)
            return []

        if not isinstance(records, list):
            logger.error(
                "Error reading pokemons from %s: expected a JSON array, got %s",
                self.path,
                type(records).__name__,
            )
            return []

        return records

    async def save(self, records: List[Record]) -> None:
        """
        Serialize and overwrite the full collection.

        Output is indented by two spaces with non-ASCII text written as-is,
        so Japanese names stay readable in the file.

        Raises:
            PersistenceError: The collection could not be encoded or written.
        """
        try:
            payload = json.dumps(records, indent=2, ensure_ascii=False)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(self.path, "w", encoding="utf-8") as f:
                await f.write(payload)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Error writing pokemons to %s: %s", self.path, e)
            raise PersistenceError(
                context={"path": str(self.path), "error": str(e)},
            ) from e

        logger.debug("Wrote %d pokemons to %s", len(records), self.path)
