"""Allows `python -m pokemon_api` to start the server."""

from pokemon_api.main import run

if __name__ == "__main__":
    run()
