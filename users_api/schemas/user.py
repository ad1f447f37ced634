"""User Schema — the single resource served by the API.

Invariants:
    - User.id is always >= 1 (mirrors Identifier)
    - Instances are immutable
"""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """User response, serialized as {"id": <int>}."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1)
