from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from rankgraph.errors import EditPreparationError, NothingRankedError
from rankgraph.knowledge_graph import PropertyGraph

from .models import EditMetadata, PreparedEdit, PrepareStatus
from .service import EditPreparationService

if TYPE_CHECKING:
    from rankgraph.ranking import RankingSession

logger = logging.getLogger(__name__)


class EditPreparer:
    """Tracks one preparation at a time: its status and the prepared bundle.

    Failures land in `status` for the user to read and are not raised; only
    cancellation propagates. Retrying is up to the caller.
    """

    def __init__(self, service: EditPreparationService):
        self.service = service
        self.status = PrepareStatus()
        self.prepared: PreparedEdit | None = None

    @property
    def is_preparing(self) -> bool:
        return self.status.status == "preparing"

    async def prepare(self, graph: PropertyGraph, metadata: EditMetadata) -> PreparedEdit | None:
        self.prepared = None
        self.status = PrepareStatus(status="preparing", message="Preparing edits...")
        try:
            prepared = await self.service.prepare(graph, metadata)
        except EditPreparationError as e:
            logger.warning("edit preparation failed: %s", e.message)
            self.status = PrepareStatus(status="error", message=e.message or "Failed to prepare edits")
            return None
        except asyncio.CancelledError:
            self.status = PrepareStatus(status="error", message="Edit preparation was cancelled")
            raise
        except Exception as e:
            logger.exception("edit preparation service raised")
            self.status = PrepareStatus(status="error", message=str(e) or "Failed to prepare edits")
            return None

        self.prepared = prepared
        self.status = PrepareStatus(
            status="success",
            message=f"Prepared {prepared.summary.total_ops} operations",
        )
        return prepared

    def reset(self) -> None:
        self.prepared = None
        self.status = PrepareStatus()


async def prepare_session_edits(session: RankingSession, preparer: EditPreparer) -> PreparedEdit | None:
    """Prepare edits for the session's current ranking.

    Raises NothingRankedError, without touching the preparer, when no item is ranked.
    """
    if session.ranked_count == 0:
        raise NothingRankedError()

    metadata = EditMetadata(title=session.rank_list.name, description=session.prepare_description())
    return await preparer.prepare(session.property_graph(), metadata)
