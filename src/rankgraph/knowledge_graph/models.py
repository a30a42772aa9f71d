from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field


class EntityKind(str, Enum):
    RANK_LIST = "rank_list"
    ITEM = "item"
    OTHER = "other"


DEFAULT_RANK_TYPE = "weighted_rank"


@dataclass(frozen=True, slots=True)
class ItemEntity:
    """A rankable item. Supplied by the caller, never created by the engine."""

    id: str
    name: str
    glyph: str = ""
    kind: EntityKind = field(default=EntityKind.ITEM, init=False)


@dataclass(frozen=True, slots=True)
class RankListEntity:
    """The single list a session builds; every relation starts here."""

    id: str
    name: str
    rank_type: str = DEFAULT_RANK_TYPE
    kind: EntityKind = field(default=EntityKind.RANK_LIST, init=False)


@dataclass(frozen=True, slots=True)
class OtherEntity:
    id: str
    props: dict[str, Any] = field(default_factory=dict)
    kind: EntityKind = field(default=EntityKind.OTHER, init=False)


Entity = Union[RankListEntity, ItemEntity, OtherEntity]


@dataclass(frozen=True, slots=True)
class ScoredRelation:
    """A directed, scored edge from the rank list to an item."""

    id: str
    from_id: str
    to_id: str
    score: float


@dataclass(frozen=True, slots=True)
class KnowledgeGraph:
    entities: tuple[Entity, ...]
    relations: tuple[ScoredRelation, ...]

    def to_dict(self) -> dict[str, Any]:
        entities: list[dict[str, Any]] = []
        for e in self.entities:
            match e:
                case RankListEntity():
                    entities.append(
                        {"id": e.id, "kind": e.kind.value, "name": e.name, "rank_type": e.rank_type}
                    )
                case ItemEntity():
                    entities.append({"id": e.id, "kind": e.kind.value, "name": e.name, "glyph": e.glyph})
                case _:
                    entities.append(
                        {"id": e.id, "kind": EntityKind.OTHER.value, "props": dict(getattr(e, "props", {}))}
                    )
        return {
            "entities": entities,
            "relations": [
                {"id": r.id, "from": r.from_id, "to": r.to_id, "score": r.score} for r in self.relations
            ],
        }


@dataclass(frozen=True, slots=True)
class GraphStats:
    entities: int
    relations: int
    ranked: int
    total_items: int


# --- Property graph (export shape) ---


class PropertyGraphEntity(BaseModel):
    id: str
    properties: dict[str, Any] = Field(default_factory=dict)


class PropertyGraphRelation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    from_id: str = Field(alias="from")
    to_id: str = Field(alias="to")
    properties: dict[str, Any] = Field(default_factory=dict)


class PropertyGraph(BaseModel):
    entities: list[PropertyGraphEntity] = Field(default_factory=list)
    relations: list[PropertyGraphRelation] = Field(default_factory=list)

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
