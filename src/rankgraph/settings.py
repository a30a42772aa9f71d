from __future__ import annotations

from pydantic import Field

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except Exception as e:  # pragma: no cover
    raise RuntimeError(
        "pydantic-settings is required. Install with: pip install pydantic-settings"
    ) from e


class RankGraphSettings(BaseSettings):
    """Unified configuration for rankgraph.

    Environment variables are prefixed with RANKGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="RANKGRAPH_", extra="ignore")

    # --- Core ---
    log_level: str = Field(default="INFO", description="Python logging level")
    catalog_path: str | None = Field(default=None, description="JSON catalog for `serve`")

    # --- Export ---
    export_dir: str = Field(default=".")
    graph_filename: str = Field(default="slider-ranking-graph.json")
    edits_filename: str = Field(default="grc20-edits.json")

    # --- Edit preparation service ---
    prepare_url: str = Field(default="http://localhost:3000")
    prepare_path: str = Field(default="/api/grc20/prepare")
    prepare_api_key: str | None = Field(default=None)
    prepare_connect_attempts: int = Field(
        default=3, description="Retries for connection failures only; service errors never retry"
    )

    # --- HTTP API ---
    bind_host: str = "0.0.0.0"
    bind_port: int = 8090
    api_key: str | None = Field(default=None, description="If set, require X-API-Key")


settings = RankGraphSettings()
