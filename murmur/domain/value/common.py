"""Shared configuration for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable, hashable, equal when all fields are equal."""

    model_config = ConfigDict(frozen=True)
