from __future__ import annotations

import pytest
import requests

from mdpreview.renderer import DiagramRenderError, DiagramRenderer, render_document_diagrams


class FakeResponse:
    def __init__(self, content: bytes = b"<svg/>", status_code: int = 200, text: str = ""):
        self.content = content
        self.status_code = status_code
        self.text = text

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


class FakeSession:
    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def post(self, url, data=None, headers=None, timeout=None):
        self.calls.append({"url": url, "data": data, "headers": headers, "timeout": timeout})
        return self.responses.pop(0)


def test_render_posts_plain_text_to_kroki_endpoint():
    session = FakeSession([FakeResponse(b"<svg>ok</svg>")])
    renderer = DiagramRenderer("https://kroki.example/", timeout_s=5, session=session)
    content = renderer.render("```mermaid\ngraph TD\n  A-->B\n```", "SVG")
    assert content == b"<svg>ok</svg>"
    call = session.calls[0]
    assert call["url"] == "https://kroki.example/mermaid/svg"
    assert call["data"] == b"graph TD\n  A-->B"
    assert call["timeout"] == 5


def test_unknown_format_falls_back_to_svg():
    session = FakeSession([FakeResponse()])
    DiagramRenderer("https://kroki.example", session=session).render("graph TD", "gif")
    assert session.calls[0]["url"].endswith("/mermaid/svg")


def test_http_error_becomes_render_error():
    session = FakeSession([FakeResponse(status_code=400, text="Syntax error in graph")])
    renderer = DiagramRenderer("https://kroki.example", session=session)
    with pytest.raises(DiagramRenderError) as ei:
        renderer.render("gitgraph\n  commit")
    assert "Syntax error in graph" in str(ei.value)


def test_empty_source_is_rejected():
    renderer = DiagramRenderer("https://kroki.example", session=FakeSession([]))
    with pytest.raises(DiagramRenderError):
        renderer.render("   \n")


def test_missing_url_is_rejected():
    with pytest.raises(DiagramRenderError):
        DiagramRenderer("")


def test_document_render_keeps_per_block_errors():
    session = FakeSession([FakeResponse(b"one"), FakeResponse(status_code=500, text="boom")])
    renderer = DiagramRenderer("https://kroki.example", session=session)
    text = "# Doc\n\n```mermaid\ngraph TD\n A-->B\n```\n\n```mermaid\npie\n \"a\" : 1\n```\n"
    results = render_document_diagrams(text, renderer, "png")
    assert [r.index for r in results] == [1, 2]
    assert results[0].ok and results[0].content == b"one"
    assert not results[1].ok and "boom" in results[1].error
    assert session.calls[0]["url"].endswith("/mermaid/png")
