from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import requests

from .config import get_settings
from .fences import DIAGRAM_BLOCK_RE, strip_fence

logger = logging.getLogger(__name__)


class DiagramRenderError(RuntimeError):
    """Raised when the external renderer rejects or cannot render a diagram."""


def normalize_format(fmt: Optional[str]) -> str:
    if not fmt:
        return "svg"
    fmt = fmt.lower().strip()
    if fmt in {"png", "svg"}:
        return fmt
    return "svg"


@dataclass(frozen=True, slots=True)
class RenderedDiagram:
    index: int
    source: str
    content: Optional[bytes] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DiagramRenderer:
    """Thin client for a Kroki-compatible server (``POST {base}/mermaid/{fmt}``)."""

    def __init__(self, base_url: str, *, timeout_s: float = 30.0, session: Optional[requests.Session] = None):
        if not base_url:
            raise DiagramRenderError("renderer URL not configured")
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls) -> "DiagramRenderer":
        settings = get_settings()
        if not settings.renderer_url:
            raise DiagramRenderError("MDPREVIEW_RENDERER_URL not configured")
        return cls(settings.renderer_url, timeout_s=settings.request_timeout_s)

    def render(self, source: str, fmt: Optional[str] = None) -> bytes:
        fmt = normalize_format(fmt)
        code = strip_fence(source).strip()
        if not code:
            raise DiagramRenderError("diagram source is empty")
        endpoint = f"{self.base_url}/mermaid/{fmt}"
        try:
            response = self.session.post(
                endpoint,
                data=code.encode("utf-8"),
                headers={"Content-Type": "text/plain; charset=utf-8"},
                timeout=self.timeout_s,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            detail = ""
            body = getattr(getattr(exc, "response", None), "text", "")
            if body:
                detail = f": {body.strip()[:200]}"
            raise DiagramRenderError(f"Mermaid rendering failed: {exc}{detail}") from exc
        return response.content


def render_document_diagrams(
    text: str,
    renderer: DiagramRenderer,
    fmt: Optional[str] = None,
) -> List[RenderedDiagram]:
    """Render every fenced Mermaid block in ``text``, keeping per-block errors."""
    results: List[RenderedDiagram] = []
    for idx, match in enumerate(DIAGRAM_BLOCK_RE.finditer(text), start=1):
        body = match.group("body")
        try:
            content = renderer.render(body, fmt)
        except DiagramRenderError as exc:
            logger.warning("Diagram %d failed to render: %s", idx, exc)
            results.append(RenderedDiagram(index=idx, source=body, error=str(exc)))
            continue
        results.append(RenderedDiagram(index=idx, source=body, content=content))
    return results
