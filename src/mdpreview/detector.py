"""Classify preview input as Markdown, bare Mermaid, a mix of both, or empty.

The classifier works from raw text alone. Three independent signals are
computed and combined in a fixed priority order:

* ``looks_like_diagram``: the first non-blank line starts with a Mermaid
  diagram keyword (any casing).
* ``contains_diagram_blocks``: a ```` ```mermaid ```` fence opens at a line
  start somewhere in the text.
* ``has_prose_features``: any Markdown marker appears outside the Mermaid
  fences.
"""

from __future__ import annotations

import logging
import re
from typing import List, Pattern

from .fences import DIAGRAM_BLOCK_RE, FENCE_OPEN_RE, WRAP_FIX
from .keywords import match_keyword
from .models import ClassificationResult, ContentKind, PresentationHints

logger = logging.getLogger(__name__)

PROSE_PATTERNS: List[Pattern[str]] = [
    re.compile(r"^#{1,6}\s", re.MULTILINE),  # headings
    re.compile(r"^\s*[-*+]\s", re.MULTILINE),  # bullets
    re.compile(r"^\s*\d+\.\s", re.MULTILINE),  # numbered items
    re.compile(r"\[.+?\]\(.+?\)"),  # links
    re.compile(r"!\[.*?\]\(.+?\)"),  # images
    re.compile(r"\*\*.+?\*\*"),  # bold
    re.compile(r"\*.+?\*"),  # italic
    re.compile(r"~~.+?~~"),  # strikethrough
    re.compile(r"^>\s", re.MULTILINE),  # blockquotes
    re.compile(r"\|.+\|.+\|"),  # table rows
    re.compile(r"^---+$", re.MULTILINE),
    re.compile(r"^===+$", re.MULTILINE),
    re.compile(r"```[\s\S]*?```"),  # fenced code, any language
    re.compile(r"`[^`]+`"),  # inline code
    re.compile(r"^\s*- \[[ xX]\]", re.MULTILINE),  # task lists
]

_EMPTY_HINTS = PresentationHints(
    label="Empty",
    code="EMPTY",
    foreground="text-slate-400",
    background="bg-slate-500/20",
    border="border-slate-500/30",
    description="No content, start typing!",
)
_DIAGRAM_HINTS = PresentationHints(
    label="Raw Mermaid",
    code="MMD",
    foreground="text-purple-400",
    background="bg-purple-500/20",
    border="border-purple-500/30",
    description="Raw Mermaid diagram detected, auto-wrapped in ```mermaid fence",
)
_PROSE_HINTS = PresentationHints(
    label="Markdown",
    code="MD",
    foreground="text-blue-400",
    background="bg-blue-500/20",
    border="border-blue-500/30",
    description="Standard Markdown content",
)
_TEXT_HINTS = PresentationHints(
    label="Text",
    code="TXT",
    foreground="text-slate-400",
    background="bg-slate-500/20",
    border="border-slate-500/30",
    description="Plain text content",
)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


def _trim(text: str) -> str:
    # str.strip() keeps U+FEFF, and a BOM in front of the keyword hides it.
    return text.strip().lstrip("\ufeff").strip()


def first_content_line(text: str) -> str:
    for line in text.splitlines():
        line = _trim(line)
        if line:
            return line
    return ""


def looks_like_diagram(text: str) -> bool:
    """True when the first non-blank line opens a Mermaid diagram."""
    line = first_content_line(text)
    if not line:
        return False
    return match_keyword(line) is not None


def contains_diagram_blocks(text: str) -> bool:
    return FENCE_OPEN_RE.search(text) is not None


def count_diagram_blocks(text: str) -> int:
    return len(FENCE_OPEN_RE.findall(text))


def has_prose_features(text: str) -> bool:
    # Mermaid fences would otherwise match the generic code-block pattern, and
    # diagram bodies are full of '*' and '|'.
    outside = DIAGRAM_BLOCK_RE.sub("", text)
    return any(pattern.search(outside) for pattern in PROSE_PATTERNS)


def classify(text: str) -> ClassificationResult:
    trimmed = _trim(text or "")
    if not trimmed:
        return ClassificationResult(
            kind=ContentKind.EMPTY,
            reason="empty",
            diagram_block_count=0,
            hints=_EMPTY_HINTS,
        )

    has_prose = has_prose_features(trimmed)
    has_blocks = contains_diagram_blocks(trimmed)
    is_bare = looks_like_diagram(trimmed)
    block_count = count_diagram_blocks(trimmed)
    logger.debug(
        "classify signals: bare=%s blocks=%s (%d) prose=%s", is_bare, has_blocks, block_count, has_prose
    )

    if is_bare and not has_prose and not has_blocks:
        return ClassificationResult(
            kind=ContentKind.DIAGRAM,
            reason="bare_diagram",
            diagram_block_count=1,
            hints=_DIAGRAM_HINTS,
            fixes_preview=(WRAP_FIX,),
        )

    if has_prose and (has_blocks or is_bare):
        count = block_count or 1
        return ClassificationResult(
            kind=ContentKind.MIXED,
            reason="prose_with_diagrams",
            diagram_block_count=count,
            hints=PresentationHints(
                label="Markdown + Mermaid",
                code="MD+MMD",
                foreground="text-cyan-400",
                background="bg-cyan-500/20",
                border="border-cyan-500/30",
                description=f"Mixed content, {_plural(count, 'Mermaid diagram')} detected",
            ),
        )

    if has_blocks and not has_prose:
        return ClassificationResult(
            kind=ContentKind.MIXED,
            reason="fenced_diagrams",
            diagram_block_count=block_count,
            hints=PresentationHints(
                label="Fenced Mermaid",
                code="MMD",
                foreground="text-purple-400",
                background="bg-purple-500/20",
                border="border-purple-500/30",
                description=_plural(block_count, "fenced Mermaid diagram"),
            ),
        )

    if has_prose:
        return ClassificationResult(
            kind=ContentKind.PROSE,
            reason="prose",
            diagram_block_count=0,
            hints=_PROSE_HINTS,
        )

    return ClassificationResult(
        kind=ContentKind.PROSE,
        reason="plain_text",
        diagram_block_count=0,
        hints=_TEXT_HINTS,
    )
