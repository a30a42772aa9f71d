from __future__ import annotations

import json
import logging
from pathlib import Path

from rankgraph.edits import PreparedEdit
from rankgraph.knowledge_graph import PropertyGraph
from rankgraph.settings import settings

logger = logging.getLogger(__name__)


def property_graph_json(graph: PropertyGraph) -> str:
    return json.dumps(graph.to_json_dict(), indent=2, ensure_ascii=False)


def prepared_edit_json(prepared: PreparedEdit) -> str:
    return json.dumps(prepared.edit, indent=2, ensure_ascii=False)


def _write(directory: str | Path | None, filename: str, text: str) -> Path:
    out_dir = Path(directory or settings.export_dir).expanduser()
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / filename
    path.write_text(text + "\n", encoding="utf-8")
    logger.info("wrote %s", path)
    return path


def write_property_graph(
    graph: PropertyGraph, directory: str | Path | None = None, filename: str | None = None
) -> Path:
    return _write(directory, filename or settings.graph_filename, property_graph_json(graph))


def write_prepared_edit(
    prepared: PreparedEdit, directory: str | Path | None = None, filename: str | None = None
) -> Path:
    return _write(directory, filename or settings.edits_filename, prepared_edit_json(prepared))
