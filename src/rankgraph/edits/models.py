from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

PrepareState = Literal["idle", "preparing", "success", "error"]


class EditMetadata(BaseModel):
    title: str
    description: str


class EditSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_ops: int = Field(default=0, alias="totalOps")
    entity_ops: int = Field(default=0, alias="entityOps")
    property_ops: int = Field(default=0, alias="propertyOps")
    relation_ops: int = Field(default=0, alias="relationOps")


class PreparedEdit(BaseModel):
    """Bundle returned by the preparation service.

    `edit` is the operation document as the service produced it; only its
    `name` is interpreted here.
    """

    edit: dict[str, Any]
    summary: EditSummary = Field(default_factory=EditSummary)

    @property
    def name(self) -> str:
        return str(self.edit.get("name") or "")


class PrepareStatus(BaseModel):
    status: PrepareState = "idle"
    message: str | None = None
