from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field


class TextRequest(BaseModel):
    text: str = Field("", description="Raw editor content")


class FixRequest(TextRequest):
    bare_diagram: Optional[bool] = Field(
        None,
        description="Treat the whole input as bare Mermaid; derived from classification when omitted.",
    )


class ClassificationResponse(BaseModel):
    kind: str
    reason: str
    diagram_block_count: int
    label: str
    code: str
    foreground: str
    background: str
    border: str
    description: str = ""
    fixes_preview: List[str] = []


class FixResponse(BaseModel):
    corrected_text: str
    applied_fixes: List[str] = []
    was_modified: bool = False


class PreviewResponse(BaseModel):
    classification: ClassificationResponse
    outcome: FixResponse


class RenderedDiagramEntry(BaseModel):
    index: int
    format: str
    content_base64: Optional[str] = None
    error: Optional[str] = None


class RenderResponse(BaseModel):
    diagrams: List[RenderedDiagramEntry]
    applied_fixes: List[str] = []


class HealthResponse(BaseModel):
    status: str = "ok"
    debounce_ms: Optional[int] = None


class SampleListResponse(BaseModel):
    samples: List[str]


class SampleResponse(BaseModel):
    name: str
    text: str
