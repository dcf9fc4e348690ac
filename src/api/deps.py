from __future__ import annotations

from functools import lru_cache

from fastapi import HTTPException, status

from mdpreview.config import get_settings, Settings
from mdpreview.renderer import DiagramRenderError, DiagramRenderer


@lru_cache()
def get_cached_settings() -> Settings:
    return get_settings()


def renderer_dependency() -> DiagramRenderer:
    try:
        return DiagramRenderer.from_settings()
    except DiagramRenderError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
