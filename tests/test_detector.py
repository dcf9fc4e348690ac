from __future__ import annotations

import pytest

from mdpreview.detector import (
    classify,
    count_diagram_blocks,
    has_prose_features,
    looks_like_diagram,
)
from mdpreview.models import ContentKind


@pytest.mark.parametrize("text", ["", "   \n", "\n\t\n"])
def test_blank_input_is_empty(text):
    result = classify(text)
    assert result.kind is ContentKind.EMPTY
    assert result.diagram_block_count == 0
    assert result.fixes_preview == ()


def test_bare_gitgraph_is_diagram():
    result = classify('gitgraph\n  commit id: "a"')
    assert result.kind is ContentKind.DIAGRAM
    assert result.is_bare_diagram
    assert result.diagram_block_count == 1
    assert result.reason == "bare_diagram"
    assert result.fixes_preview == ("Auto-wrapped bare diagram in ```mermaid fence",)


def test_heading_with_fenced_block_is_mixed():
    result = classify("# Title\n\n```mermaid\ngitGraph\n  commit\n```")
    assert result.kind is ContentKind.MIXED
    assert result.reason == "prose_with_diagrams"
    assert result.diagram_block_count == 1
    assert result.hints.label == "Markdown + Mermaid"


def test_heading_only_is_prose():
    result = classify("# Just a heading")
    assert result.kind is ContentKind.PROSE
    assert result.reason == "prose"
    assert result.diagram_block_count == 0


def test_plain_sentence_falls_back_to_text():
    result = classify("hello there, nothing special here")
    assert result.kind is ContentKind.PROSE
    assert result.reason == "plain_text"
    assert result.hints.label == "Text"


def test_fenced_blocks_without_prose_keep_distinct_label():
    text = "```mermaid\ngraph TD\n  A-->B\n```\n\n```mermaid\npie\n  \"a\" : 1\n```"
    result = classify(text)
    assert result.kind is ContentKind.MIXED
    assert result.reason == "fenced_diagrams"
    assert result.hints.label == "Fenced Mermaid"
    assert result.diagram_block_count == 2


def test_prose_with_bare_diagram_counts_one_block():
    result = classify("sequenceDiagram\n  Alice->>Bob: **hi**")
    assert result.kind is ContentKind.MIXED
    assert result.diagram_block_count == 1


def test_fence_tag_is_case_insensitive():
    assert count_diagram_blocks("```Mermaid\ngraph LR\n```\n```MERMAID\npie\n```") == 2


def test_fence_must_start_a_line():
    assert count_diagram_blocks("see ```mermaid\ngraph LR\n```") == 0


@pytest.mark.parametrize(
    "line",
    ["gitGraph", "GITGRAPH", "graph TD", "flowchart LR", "stateDiagram-v2", "pie title Pets", "erDiagram"],
)
def test_keyword_lines_look_like_diagrams(line):
    assert looks_like_diagram(f"\n\n{line}\n  body")


@pytest.mark.parametrize("line", ["graphics are fun", "Pieces of eight", "gitgraphs", "A gantt chart"])
def test_keyword_embedded_in_prose_is_not_a_diagram(line):
    assert not looks_like_diagram(line)


@pytest.mark.parametrize(
    "text",
    [
        "## Heading",
        "- item",
        "3. third",
        "[link](https://example.com)",
        "![alt](img.png)",
        "some **bold** text",
        "some *italic* text",
        "~~gone~~",
        "> quoted",
        "| a | b |",
        "---",
        "===",
        "```python\nprint(1)\n```",
        "use `code` here",
        "- [ ] todo",
    ],
)
def test_each_prose_marker_is_detected(text):
    assert has_prose_features(text)


def test_mermaid_fence_alone_is_not_a_prose_marker():
    assert not has_prose_features("```mermaid\nflowchart LR\n  A -->|yes| B -->|no| C\n```")


def test_classify_is_deterministic():
    text = "# Doc\n\n```mermaid\ngraph TD\n A-->B\n```"
    assert classify(text) == classify(text)


def test_byte_order_mark_does_not_hide_the_keyword():
    result = classify('\ufeffgitgraph\n  commit id: "a"\n  tag: "v1"')
    assert result.kind is ContentKind.DIAGRAM
    assert result.diagram_block_count == 1
    assert looks_like_diagram("\ufeff\n  \ufeffsequenceDiagram\n  A->>B: hi")


@pytest.mark.parametrize("text", ["\ufeff", "\ufeff\n", "  \ufeff \n\t"])
def test_byte_order_mark_alone_is_empty(text):
    result = classify(text)
    assert result.kind is ContentKind.EMPTY
    assert result.diagram_block_count == 0
