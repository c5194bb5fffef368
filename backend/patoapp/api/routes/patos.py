"""Pato Routes — catalog browsing for visitors, mutations for admins.

Invariants:
    - Every route needs an active session (401 otherwise)
    - POST/PATCH/DELETE need role=admin (403 otherwise)
    - Sound access needs plan=paid (403 otherwise)
    - Unknown ids → 404; the repository's False/None is translated here
    - group="all" means "no group filter" (the catalog selector's default option)

Design Decisions:
    - /groups declared before /{pato_id} so the literal path wins
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from patoapp.api.dependencies import (
    get_pato_repository, require_admin, require_paid_plan, require_user,
)
from patoapp.core.catalog_search import SearchFilters
from patoapp.core.errors import FormValidationError, ResourceNotFoundError
from patoapp.core.validate_forms import validate_pato_draft
from patoapp.schemas.pato import Pato, PatoDraft, PatoPatch
from patoapp.services.pato_repository import PatoRepository

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/patos", tags=["patos"], dependencies=[Depends(require_user)],
)

ALL_GROUPS = "all"


@router.get("", response_model=list[Pato])
async def search_patos(
    q: str = Query("", max_length=200),
    group: str | None = Query(None),
    habitat: str | None = Query(None),
    diet: str | None = Query(None),
    repo: PatoRepository = Depends(get_pato_repository),
):
    """Search the catalog; no parameters lists everything sorted by name."""
    filters = SearchFilters(
        group=None if group == ALL_GROUPS else group,
        habitat=habitat,
        diet=diet,
    )
    return await repo.search(q, filters)


@router.get("/groups", response_model=list[str])
async def list_groups(repo: PatoRepository = Depends(get_pato_repository)):
    """Distinct taxonomic groups present in the catalog."""
    return await repo.groups()


@router.get("/{pato_id}", response_model=Pato)
async def get_pato(pato_id: str, repo: PatoRepository = Depends(get_pato_repository)):
    pato = await repo.get(pato_id)
    if pato is None:
        raise ResourceNotFoundError("Pato", pato_id)
    return pato


@router.get("/{pato_id}/sound", dependencies=[Depends(require_paid_plan)])
async def get_pato_sound(
    pato_id: str, repo: PatoRepository = Depends(get_pato_repository),
):
    """Sound reference for playback — premium only."""
    pato = await repo.get(pato_id)
    if pato is None:
        raise ResourceNotFoundError("Pato", pato_id)
    return {"pato_id": pato.id, "name": pato.name, "sound": pato.sound}


@router.post(
    "", response_model=Pato, status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_pato(
    body: PatoDraft, repo: PatoRepository = Depends(get_pato_repository),
):
    errors = validate_pato_draft(body.model_dump())
    if errors:
        raise FormValidationError(errors)
    return await repo.add(body)


@router.patch(
    "/{pato_id}", response_model=Pato, dependencies=[Depends(require_admin)],
)
async def update_pato(
    pato_id: str,
    body: PatoPatch,
    repo: PatoRepository = Depends(get_pato_repository),
):
    errors = validate_pato_draft(body.changes(), partial=True)
    if errors:
        raise FormValidationError(errors)
    if not await repo.update(pato_id, body):
        raise ResourceNotFoundError("Pato", pato_id)
    return await repo.get(pato_id)


@router.delete(
    "/{pato_id}", status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
async def delete_pato(
    pato_id: str, repo: PatoRepository = Depends(get_pato_repository),
):
    if not await repo.delete(pato_id):
        raise ResourceNotFoundError("Pato", pato_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
