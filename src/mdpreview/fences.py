from __future__ import annotations

import re

DIAGRAM_LANGUAGE = "mermaid"
FENCE = "```"
WRAP_FIX = "Auto-wrapped bare diagram in ```mermaid fence"

FENCE_OPEN_RE = re.compile(r"^```mermaid[ \t]*\r?\n", re.IGNORECASE | re.MULTILINE)
DIAGRAM_BLOCK_RE = re.compile(
    r"(?P<open>^```mermaid[ \t]*\r?\n)(?P<body>.*?)(?P<close>^[ \t]*```)",
    re.IGNORECASE | re.MULTILINE | re.DOTALL,
)


def wrap_in_fence(body: str) -> str:
    body = body.rstrip("\r\n")
    return f"{FENCE}{DIAGRAM_LANGUAGE}\n{body}\n{FENCE}"


def strip_fence(text: str) -> str:
    """Return the body of a single fenced diagram, or the text unchanged."""
    match = DIAGRAM_BLOCK_RE.search(text.strip())
    if match and match.start() == 0:
        return match.group("body")
    return text
