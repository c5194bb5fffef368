"""Pato Schemas — catalog entity, creation draft and partial update.

Invariants:
    - Pato.id is non-empty
    - PatoDraft has no id (assigned by the repository)
    - PatoPatch cannot carry an id (extra fields forbidden)
"""

from pydantic import BaseModel, ConfigDict, Field


class PatoDraft(BaseModel):
    """Catalog entry without identifier — input to PatoRepository.add."""
    name: str
    scientific_name: str
    description: str
    behavior: str
    habitat: str
    plumage: str
    diet: str
    group: str
    image: str = ""
    sound: str


class Pato(PatoDraft):
    """Catalog entry as stored and served."""
    id: str = Field(min_length=1)


class PatoPatch(BaseModel):
    """Partial update — unset fields keep their stored value."""
    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    scientific_name: str | None = None
    description: str | None = None
    behavior: str | None = None
    habitat: str | None = None
    plumage: str | None = None
    diet: str | None = None
    group: str | None = None
    image: str | None = None
    sound: str | None = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)
