"""Preparing a ranking's property graph as an external edit batch."""

from .models import EditMetadata, EditSummary, PreparedEdit, PrepareStatus
from .preparer import EditPreparer, prepare_session_edits
from .service import EditPreparationService, HttpEditPreparationService

__all__ = [
    "EditMetadata",
    "EditPreparationService",
    "EditPreparer",
    "EditSummary",
    "HttpEditPreparationService",
    "PrepareStatus",
    "PreparedEdit",
    "prepare_session_edits",
]
