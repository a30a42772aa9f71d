from __future__ import annotations

import asyncio
import logging

import uvicorn

from rankgraph.catalog import load_catalog
from rankgraph.edits import EditPreparer, HttpEditPreparationService
from rankgraph.ranking import RankingSession
from rankgraph.settings import settings

from .app import create_app

logger = logging.getLogger(__name__)


async def _main(catalog_path: str | None = None) -> None:
    path = catalog_path or settings.catalog_path
    if not path:
        raise RuntimeError("No catalog configured. Set RANKGRAPH_CATALOG_PATH or pass --catalog.")

    rank_list, items = load_catalog(path)
    session = RankingSession(rank_list, items)
    service = HttpEditPreparationService()
    app = create_app(session, EditPreparer(service))

    config = uvicorn.Config(
        app,
        host=settings.bind_host,
        port=settings.bind_port,
        log_level=(settings.log_level or "info").lower(),
    )
    server = uvicorn.Server(config)
    logger.info("serving %s on %s:%d", rank_list.name, settings.bind_host, settings.bind_port)

    try:
        await server.serve()
    finally:
        await service.aclose()


def main(catalog_path: str | None = None) -> None:
    asyncio.run(_main(catalog_path))


if __name__ == "__main__":
    main()
