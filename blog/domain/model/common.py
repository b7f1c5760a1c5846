"""Base class for domain models."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain model.

    Models are read from the store and never mutated; changes such as
    attaching tags produce a copy.
    """

    model_config = ConfigDict(frozen=True)
