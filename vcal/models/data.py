"""Structured (JSON) form of a component tree with Pydantic v2 validation."""

from pydantic import BaseModel, Field


class ComponentData(BaseModel):
    """Plain data view of a component: type, properties and children."""

    type: str
    properties: dict[str, str | None] = Field(default_factory=dict)
    children: list["ComponentData"] = Field(default_factory=list)


ComponentData.model_rebuild()
