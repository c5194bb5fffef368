"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: store methods are async because implementations do IO,
      but core pure functions (search, validation) are never async themselves
"""

from typing import Protocol


class PatoLike(Protocol):
    """Structural contract for catalog entries passed to core search.

    Avoids coupling core to the pydantic model while giving mypy
    real type information (unlike Any).
    """
    id: str
    name: str
    scientific_name: str
    description: str
    habitat: str
    diet: str
    group: str


class KeyValueStore(Protocol):
    """Contract for the durable key-value substrate — implemented by shell.

    Values are serialized JSON documents; every set() replaces the whole value.
    """
    async def get(self, key: str) -> str | None: ...
    async def set(self, key: str, value: str) -> None: ...
    async def remove(self, key: str) -> None: ...
