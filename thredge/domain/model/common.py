"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are frozen: a change produces a new instance via model_copy,
    so tree snapshots built from them can never be mutated in place.
    """

    model_config = ConfigDict(frozen=True)
