"""Catalog Search — text + attribute filtering with locale-aware ordering.

Invariants:
    - Empty query and no filters returns the whole collection, sorted
    - Query matches name, scientific_name or description (case-insensitive substring)
    - group is an exact match; habitat and diet are case-insensitive substrings
    - Empty-string filters count as "not supplied"
    - Result sorted ascending by name; ties keep collection order (stable sort)

Design Decisions:
    - Collation key strips combining marks and casefolds, so "Pato Sirirí" sorts
      with "Pato Siriri" and case never splits neighbours
    - Ties on the primary key put lowercase first, as locale collation does
    - Input list is never mutated; a new list is returned
"""

import unicodedata
from dataclasses import dataclass
from typing import Sequence, TypeVar

from patoapp.core.repository_protocols import PatoLike

P = TypeVar("P", bound=PatoLike)


@dataclass(frozen=True)
class SearchFilters:
    """Optional attribute filters — each field independently optional."""
    group: str | None = None
    habitat: str | None = None
    diet: str | None = None


def collation_key(text: str) -> tuple[str, str]:
    """Primary: accent- and case-insensitive.

    Secondary: swapped-case raw text, so unaccented sorts before accented and
    lowercase before uppercase ("pato" < "Pato"), matching ICU's tertiary order.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), text.swapcase()


def matches_query(pato: PatoLike, query: str) -> bool:
    if not query:
        return True
    needle = query.lower()
    return (
        needle in pato.name.lower()
        or needle in pato.scientific_name.lower()
        or needle in pato.description.lower()
    )


def matches_filters(pato: PatoLike, filters: SearchFilters) -> bool:
    if filters.group and pato.group != filters.group:
        return False
    if filters.habitat and filters.habitat.lower() not in pato.habitat.lower():
        return False
    if filters.diet and filters.diet.lower() not in pato.diet.lower():
        return False
    return True


def search_patos(
    patos: Sequence[P], query: str = "", filters: SearchFilters | None = None,
) -> list[P]:
    """Filter by query and filters, then sort by name."""
    active = filters or SearchFilters()
    found = [
        p for p in patos
        if matches_query(p, query) and matches_filters(p, active)
    ]
    return sorted(found, key=lambda p: collation_key(p.name))


def distinct_groups(patos: Sequence[PatoLike]) -> list[str]:
    """Distinct taxonomic groups, sorted — feeds the group filter options."""
    return sorted({p.group for p in patos if p.group}, key=collation_key)
