"""Shared configuration for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for entities.

    Entities are frozen: services derive a changed copy with
    ``model_copy(update=...)`` and hand it to the repository. Copies that
    touch validated fields go through ``model_validate`` instead.
    """

    model_config = ConfigDict(frozen=True)
