from __future__ import annotations


class RankGraphError(Exception):
    """Base class for all rankgraph errors."""


class UnknownItemError(RankGraphError, KeyError):
    """The id is not part of the session's item sequence."""

    def __init__(self, item_id: str):
        super().__init__(item_id)
        self.item_id = item_id

    def __str__(self) -> str:
        return f"unknown item: {self.item_id}"


class ItemNotRankedError(RankGraphError, KeyError):
    """Scores and adjustments only apply to ranked items."""

    def __init__(self, item_id: str):
        super().__init__(item_id)
        self.item_id = item_id

    def __str__(self) -> str:
        return f"item is not ranked: {self.item_id}"


class NothingRankedError(RankGraphError):
    def __init__(self, message: str = "Please rank some items before preparing!"):
        super().__init__(message)


class CatalogError(RankGraphError, ValueError):
    pass


class EditPreparationError(RankGraphError):
    """Raised by preparation services; the message is shown to the user."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
