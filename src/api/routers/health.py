from __future__ import annotations

from fastapi import APIRouter, Depends

from mdpreview.config import Settings

from ..deps import get_cached_settings
from ..models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/healthz", response_model=HealthResponse)
def healthcheck(settings: Settings = Depends(get_cached_settings)) -> HealthResponse:
    return HealthResponse(debounce_ms=settings.debounce_ms)
