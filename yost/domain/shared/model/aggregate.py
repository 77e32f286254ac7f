from pydantic import BaseModel, ConfigDict


class Aggregate(BaseModel):
    """Base class for aggregates. Persisted aggregates are never mutated in place."""

    model_config = ConfigDict(frozen=True)
