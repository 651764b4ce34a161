# Schemas package init
"""
Pokemon API — Response Schemas Package

    - pokemon.py: list page, delete confirmation, error and health envelopes
"""
