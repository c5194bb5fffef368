"""Pato Repository — owns the catalog collection, persisted as one JSON document.

Invariants:
    - Missing or malformed stored collection → default seed written and returned
    - An empty stored list is a valid (empty) collection, not "missing"
    - add() assigns a fresh, non-empty, previously unused id
    - update()/delete() of an unknown id return False and perform no write
    - Every successful mutation rewrites the full collection (no deltas)
    - store=None (no durable store available): reads return the seed, writes no-op
    - No method raises for data-layer reasons; write failures are logged and swallowed

Design Decisions:
    - Read-through on every call, no in-memory cache: the store is the single
      source of truth, so two repositories over one store never diverge
    - Search itself is the pure core.catalog_search function; this class only loads
"""

import json
import logging
from uuid import uuid4

from pydantic import TypeAdapter, ValidationError

from patoapp.core.catalog_search import SearchFilters, distinct_groups, search_patos
from patoapp.core.domain_types import PATOS_KEY
from patoapp.core.repository_protocols import KeyValueStore
from patoapp.core.seed_data import default_patos
from patoapp.schemas.pato import Pato, PatoDraft, PatoPatch

logger = logging.getLogger(__name__)

_PATO_LIST = TypeAdapter(list[Pato])


def seed_patos() -> list[Pato]:
    return _PATO_LIST.validate_python(default_patos())


def dump_patos(patos: list[Pato]) -> str:
    return json.dumps(
        [p.model_dump(mode="json") for p in patos], ensure_ascii=False,
    )


class PatoRepository:
    """CRUD + search over the stored catalog."""

    def __init__(self, store: KeyValueStore | None):
        self._store = store

    async def list_patos(self) -> list[Pato]:
        """Full collection, seeding the store when nothing usable is there."""
        if self._store is None:
            return seed_patos()
        try:
            raw = await self._store.get(PATOS_KEY)
        except Exception as e:
            logger.error(
                f"Catalog read failed, serving defaults: {e}",
                extra={"storage_key": PATOS_KEY},
            )
            return seed_patos()

        if raw:
            try:
                return _PATO_LIST.validate_json(raw)
            except ValidationError as e:
                logger.warning(
                    f"Stored catalog is malformed, reseeding ({e.error_count()} errors)",
                    extra={"storage_key": PATOS_KEY},
                )

        seed = seed_patos()
        await self._save(seed)
        return seed

    async def get(self, pato_id: str) -> Pato | None:
        for pato in await self.list_patos():
            if pato.id == pato_id:
                return pato
        return None

    async def add(self, draft: PatoDraft) -> Pato:
        patos = await self.list_patos()
        taken = {p.id for p in patos}
        new_id = uuid4().hex
        while new_id in taken:
            new_id = uuid4().hex

        pato = Pato(id=new_id, **draft.model_dump())
        await self._save([*patos, pato])
        logger.info(f"Added pato '{pato.name}'", extra={"pato_id": pato.id})
        return pato

    async def update(self, pato_id: str, patch: PatoPatch) -> bool:
        patos = await self.list_patos()
        index = next(
            (i for i, p in enumerate(patos) if p.id == pato_id), None,
        )
        if index is None:
            return False

        changes = patch.changes()
        changes.pop("id", None)
        patos[index] = patos[index].model_copy(update=changes)
        await self._save(patos)
        logger.info(
            f"Updated pato fields: {sorted(changes)}", extra={"pato_id": pato_id},
        )
        return True

    async def delete(self, pato_id: str) -> bool:
        patos = await self.list_patos()
        remaining = [p for p in patos if p.id != pato_id]
        if len(remaining) == len(patos):
            return False

        await self._save(remaining)
        logger.info("Deleted pato", extra={"pato_id": pato_id})
        return True

    async def search(
        self, query: str = "", filters: SearchFilters | None = None,
    ) -> list[Pato]:
        return search_patos(await self.list_patos(), query, filters)

    async def groups(self) -> list[str]:
        return distinct_groups(await self.list_patos())

    async def _save(self, patos: list[Pato]) -> None:
        """Full-document rewrite. Best-effort: failures never reach callers."""
        if self._store is None:
            return
        try:
            await self._store.set(PATOS_KEY, dump_patos(patos))
        except Exception as e:
            logger.error(
                f"Catalog write failed: {e}",
                extra={"storage_key": PATOS_KEY},
                exc_info=True,
            )
