from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from mdpreview.samples import SAMPLES, get_sample

from ..models import SampleListResponse, SampleResponse

router = APIRouter(prefix="/samples", tags=["samples"])


@router.get("", response_model=SampleListResponse)
def list_samples() -> SampleListResponse:
    return SampleListResponse(samples=list(SAMPLES))


@router.get("/{name}", response_model=SampleResponse)
def read_sample(name: str) -> SampleResponse:
    try:
        text = get_sample(name)
    except KeyError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown sample {name}") from exc
    return SampleResponse(name=name, text=text)
