from __future__ import annotations

import secrets

from fastapi import Header, HTTPException

from rankgraph.settings import settings


def require_api_key(x_api_key: str | None = Header(default=None)) -> None:
    """Guard for the /v1 ranking routes; open when RANKGRAPH_API_KEY is unset."""
    expected = settings.api_key
    if not expected:
        return
    if x_api_key is None:
        raise HTTPException(status_code=401, detail="missing X-API-Key header")
    if not secrets.compare_digest(x_api_key.encode(), expected.encode()):
        raise HTTPException(status_code=401, detail="invalid API key")
