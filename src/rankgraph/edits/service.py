from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx
from pydantic import ValidationError

from rankgraph.errors import EditPreparationError
from rankgraph.knowledge_graph import PropertyGraph
from rankgraph.settings import settings

from .http import HttpClientFactory, connect_retry
from .models import EditMetadata, PreparedEdit

logger = logging.getLogger(__name__)


class EditPreparationService(Protocol):
    """Turns a property graph into a prepared operation batch.

    Implementations raise EditPreparationError with a human-readable message.
    """

    async def prepare(self, graph: PropertyGraph, metadata: EditMetadata) -> PreparedEdit: ...


def _error_message(r: httpx.Response) -> str:
    try:
        body = r.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("error", "detail", "message"):
            if body.get(key):
                return str(body[key])
    return f"Edit preparation failed with HTTP {r.status_code}"


class HttpEditPreparationService:
    """Client for an HTTP edit-preparation endpoint.

    POST {base_url}{path} with `{"graph": ..., "metadata": {title, description}}`,
    expecting `{"edit": {...}, "summary": {...}}` back. Only connection failures
    are retried; anything the service answers is final.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        path: str | None = None,
        api_key: str | None = None,
        connect_attempts: int | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.path = path or settings.prepare_path
        self.connect_attempts = (
            connect_attempts if connect_attempts is not None else settings.prepare_connect_attempts
        )
        key = api_key if api_key is not None else settings.prepare_api_key
        # Sent per request so an injected client is never modified.
        self._headers = {"Authorization": f"Bearer {key}"} if key else {}
        self._client = client or HttpClientFactory.client(base_url=(base_url or settings.prepare_url))

    async def aclose(self):
        await self._client.aclose()

    async def _post(self, payload: dict[str, Any]) -> httpx.Response:
        return await self._client.post(self.path, json=payload, headers=self._headers)

    async def prepare(self, graph: PropertyGraph, metadata: EditMetadata) -> PreparedEdit:
        payload = {"graph": graph.to_json_dict(), "metadata": metadata.model_dump()}
        try:
            r = await connect_retry(self.connect_attempts)(self._post)(payload)
        except httpx.HTTPError as e:
            raise EditPreparationError(f"Could not reach edit preparation service: {e}") from e

        if r.is_error:
            raise EditPreparationError(_error_message(r), status_code=r.status_code)

        try:
            prepared = PreparedEdit.model_validate(r.json())
        except (ValueError, ValidationError) as e:
            raise EditPreparationError("Edit preparation service returned a malformed response") from e

        logger.info("prepared edit %r: %d ops", prepared.name, prepared.summary.total_ops)
        return prepared
