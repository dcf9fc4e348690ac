from __future__ import annotations

import base64

from fastapi import APIRouter, Depends

from mdpreview.config import Settings
from mdpreview.detector import classify
from mdpreview.fixer import fix_document
from mdpreview.pipeline import preview_document
from mdpreview.renderer import DiagramRenderer, normalize_format, render_document_diagrams

from ..deps import get_cached_settings, renderer_dependency
from ..models import (
    ClassificationResponse,
    FixRequest,
    FixResponse,
    PreviewResponse,
    RenderedDiagramEntry,
    RenderResponse,
    TextRequest,
)

router = APIRouter(tags=["preview"])


@router.post("/classify", response_model=ClassificationResponse)
def classify_text(body: TextRequest) -> ClassificationResponse:
    return ClassificationResponse(**classify(body.text).to_payload())


@router.post("/fix", response_model=FixResponse)
def fix_text(body: FixRequest) -> FixResponse:
    bare = body.bare_diagram
    if bare is None:
        bare = classify(body.text).is_bare_diagram
    return FixResponse(**fix_document(body.text, bare).to_payload())


@router.post("/preview", response_model=PreviewResponse)
def preview_text(body: TextRequest) -> PreviewResponse:
    result = preview_document(body.text)
    return PreviewResponse(
        classification=ClassificationResponse(**result.classification.to_payload()),
        outcome=FixResponse(**result.outcome.to_payload()),
    )


@router.post("/render/{fmt}", response_model=RenderResponse)
def render_text(
    fmt: str,
    body: TextRequest,
    renderer: DiagramRenderer = Depends(renderer_dependency),
    settings: Settings = Depends(get_cached_settings),
) -> RenderResponse:
    fmt = normalize_format(fmt if fmt.lower() in {"svg", "png"} else settings.render_format)
    result = preview_document(body.text)
    entries = []
    for diagram in render_document_diagrams(result.text, renderer, fmt):
        encoded = base64.b64encode(diagram.content).decode("ascii") if diagram.content else None
        entries.append(
            RenderedDiagramEntry(index=diagram.index, format=fmt, content_base64=encoded, error=diagram.error)
        )
    return RenderResponse(diagrams=entries, applied_fixes=list(result.fixes))
