"""Base entity — gives every instance a process-unique string id."""

import uuid

from pydantic import BaseModel, Field


class BaseEntity(BaseModel):
    """Base for domain entities. Subclasses declare their own fields."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
