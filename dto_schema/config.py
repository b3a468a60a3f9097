from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class Settings:
    # Records rendered when the export handler runs in preview mode
    preview_limit: int = field(default_factory=lambda: _env_int("DTO_SCHEMA_PREVIEW_LIMIT", 10))
    # Same upper bound the generate endpoint applies to `count`
    max_records: int = field(default_factory=lambda: _env_int("DTO_SCHEMA_MAX_RECORDS", 100000))
    default_mode: str = field(default_factory=lambda: os.getenv("DTO_SCHEMA_DEFAULT_MODE", "auto"))
    output_name: str = field(default_factory=lambda: os.getenv("DTO_SCHEMA_OUTPUT_NAME", "test-data"))
    log_level: str = field(default_factory=lambda: os.getenv("DTO_SCHEMA_LOG_LEVEL", "INFO"))
    server_name: str = field(default_factory=lambda: os.getenv("DTO_SCHEMA_SERVER_NAME", "127.0.0.1"))
    server_port: int = field(default_factory=lambda: _env_int("DTO_SCHEMA_SERVER_PORT", 7860))


def get_settings() -> Settings:
    """Read settings from the environment (no caching)."""
    return Settings()
