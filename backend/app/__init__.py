"""Superheroes API — FastAPI service for superhero records.

Invariants:
    - Package root contains no executable code beyond the version constant
"""

__version__ = "1.0.0"
