from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Mapping
import os


def _coerce_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    if isinstance(value, (int, float)):
        return bool(value)
    return default


def _coerce_int(value: Any, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _coerce_float(value: Any, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class Settings:
    # Logging
    log_level: str = "INFO"
    log_dir: str | None = None

    # External diagram renderer (Kroki-compatible)
    renderer_url: str | None = None
    render_format: str = "svg"
    request_timeout_s: float = 30.0

    # HTTP shell
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    api_reload: bool = False
    debounce_ms: int = 300

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "Settings":
        return cls(
            log_level=env.get("MDPREVIEW_LOG_LEVEL", cls.log_level).upper(),
            log_dir=env.get("LOG_DIR") or None,
            renderer_url=env.get("MDPREVIEW_RENDERER_URL") or None,
            render_format=env.get("MDPREVIEW_RENDER_FORMAT", cls.render_format),
            request_timeout_s=_coerce_float(env.get("MDPREVIEW_REQUEST_TIMEOUT_S"), cls.request_timeout_s),
            api_host=env.get("MDPREVIEW_API_HOST", cls.api_host),
            api_port=_coerce_int(env.get("MDPREVIEW_API_PORT"), cls.api_port),
            api_reload=_coerce_bool(env.get("MDPREVIEW_API_RELOAD"), cls.api_reload),
            debounce_ms=_coerce_int(env.get("MDPREVIEW_DEBOUNCE_MS"), cls.debounce_ms),
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings.from_env(os.environ)
