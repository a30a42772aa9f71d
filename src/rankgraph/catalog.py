from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, ValidationError

from rankgraph.errors import CatalogError
from rankgraph.knowledge_graph import ItemEntity, RankListEntity
from rankgraph.knowledge_graph.models import DEFAULT_RANK_TYPE

logger = logging.getLogger(__name__)


class RankListIn(BaseModel):
    id: str
    name: str
    rank_type: str = DEFAULT_RANK_TYPE


class ItemIn(BaseModel):
    id: str
    name: str
    glyph: str = Field(default="", validation_alias=AliasChoices("glyph", "emoji"))


class CatalogIn(BaseModel):
    rank_list: RankListIn
    items: list[ItemIn] = Field(default_factory=list)


Catalog = tuple[RankListEntity, tuple[ItemEntity, ...]]


def catalog_from_dict(data: dict[str, Any]) -> Catalog:
    try:
        parsed = CatalogIn.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"invalid catalog: {e}") from e

    seen: set[str] = set()
    for it in parsed.items:
        if it.id in seen:
            raise CatalogError(f"duplicate item id: {it.id}")
        seen.add(it.id)
    if parsed.rank_list.id in seen:
        raise CatalogError(f"rank list id collides with an item: {parsed.rank_list.id}")

    rank_list = RankListEntity(
        id=parsed.rank_list.id, name=parsed.rank_list.name, rank_type=parsed.rank_list.rank_type
    )
    items = tuple(ItemEntity(id=it.id, name=it.name, glyph=it.glyph) for it in parsed.items)
    return rank_list, items


def load_catalog(path: str | Path) -> Catalog:
    """Read `{"rank_list": {...}, "items": [...]}` from a JSON file."""
    p = Path(path).expanduser()
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"cannot read catalog {p}: {e}") from e
    if not isinstance(data, dict):
        raise CatalogError(f"catalog {p} must be a JSON object")

    rank_list, items = catalog_from_dict(data)
    logger.info("loaded catalog %s: %d items", rank_list.id, len(items))
    return rank_list, items
