"""
Pokemon API — Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the three failure kinds the API
       reports: bad input, missing record, failed write.
How:   Each exception carries a client-safe `message` and a `context` dict.
       Global handlers (registered in main.py) turn them into
       `{"error": <message>}` bodies with the matching status code.
Who:   Raised by the storage and service layers; caught by global handlers.

Exception Hierarchy:
    PokemonApiError (base)       → 500
    ├── ValidationError          → 400 Bad Request
    ├── NotFoundError            → 404 Not Found
    └── PersistenceError         → 500 Internal Server Error

The `context` dict is for server-side logs only (file paths, OS errors).
It never reaches the response body.
"""

from typing import Any, Dict, Optional


class PokemonApiError(Exception):
    """
    Base exception for all Pokemon API errors.

    Attributes:
        message:  User-facing error description (returned as the `error` field)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "Internal server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PokemonApiError):
    """
    Raised when client input fails a presence check.

    When:    POST without `name`, `type` or `base`; a body that is not a JSON object.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Missing required fields",
        fields: Optional[list] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if fields:
            ctx["fields"] = fields
        super().__init__(message=message, context=ctx)
        self.fields = fields or []


class NotFoundError(PokemonApiError):
    """
    Raised when no record matches the requested id or name.

    HTTP:    404 Not Found

    The message is always "Pokemon not found"; what was looked up goes
    into `context` so clients see one stable body.
    """

    def __init__(
        self,
        lookup: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if lookup is not None:
            ctx["lookup"] = lookup
        super().__init__(message="Pokemon not found", context=ctx)


class PersistenceError(PokemonApiError):
    """
    Raised when the collection file cannot be written.

    HTTP:    500 Internal Server Error

    The storage layer raises it with a generic message; the service
    re-raises with the operation-specific one ("Error saving pokemon",
    "Error updating pokemon", "Error deleting pokemon").
    """

    def __init__(
        self,
        message: str = "Error writing pokemons",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
