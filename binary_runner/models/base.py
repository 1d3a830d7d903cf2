"""Base model configuration for caller-owned data structures."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model, safe to share between runs."""

    model_config = ConfigDict(frozen=True)
