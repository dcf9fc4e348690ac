from __future__ import annotations

from typing import Dict

SHOWCASE = '''# Markdown + Mermaid Preview

This preview **automatically detects** whether the input is:
- plain Markdown, rendered as-is
- raw Mermaid code, wrapped in a mermaid code fence
- Markdown with embedded Mermaid blocks

| You paste | Detected as | Action |
|---|---|---|
| `# Heading` | Markdown | Render |
| `gitGraph` + commits | Raw Mermaid | Wrap + render |
| README with fences | Mixed | Fix each block |

## Branch flow

```mermaid
gitGraph
    commit id: "init"
    commit id: "add editor"
    branch feature/preview
    commit id: "add preview"
    checkout main
    merge feature/preview id: "merge preview"
    commit id: "v1.0 release" tag: "v1.0"
```

## Detection pipeline

```mermaid
flowchart TD
    A[User input] --> B{Content detector}
    B -->|Markdown| C[Markdown renderer]
    B -->|Raw Mermaid| D[Auto-fixer]
    B -->|Mixed| D
    D --> E[Mermaid renderer]
    C --> F[Live preview]
    E --> F
```

## Common mistakes (fixed automatically)

```mermaid
GitGraph
    commit id: "v1.0 release"
    tag: "v1.0"
    commit id: "hotfix"
    type: HIGHLIGHT
```
'''

RAW_GITGRAPH = '''gitgraph
    commit id: "start"
    branch develop
    commit id: "feature-1"
    checkout main
    merge develop id: "merge"
    tag: "v2.0"
    commit id: "release"
    tag: "v2.1"
'''

MARKDOWN = '''# Release notes

> Plain Markdown, no diagrams.

1. Faster startup
2. Fewer *surprises*

- [x] Ship it
- [ ] Write the blog post
'''

SAMPLES: Dict[str, str] = {
    "showcase": SHOWCASE,
    "raw-gitgraph": RAW_GITGRAPH,
    "markdown": MARKDOWN,
}


def get_sample(name: str) -> str:
    try:
        return SAMPLES[name]
    except KeyError as exc:
        raise KeyError(f"unknown sample: {name}") from exc
