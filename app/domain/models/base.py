"""Base record for the in-memory store."""

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """Stored rows are frozen; updates produce a new record."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
