from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

# Canonical Mermaid diagram keyword -> spellings it is commonly mistyped as.
# Both the classifier and the fixer build their matchers from this table and
# compare case-insensitively, so new diagram types only need an entry here.
DIAGRAM_KEYWORDS: Dict[str, FrozenSet[str]] = {
    "graph": frozenset({"graph", "Graph", "GRAPH"}),
    "flowchart": frozenset({"flowchart", "Flowchart", "FlowChart", "FLOWCHART"}),
    "sequenceDiagram": frozenset({"sequencediagram", "SequenceDiagram", "SEQUENCEDIAGRAM"}),
    "classDiagram": frozenset({"classdiagram", "ClassDiagram", "CLASSDIAGRAM"}),
    "stateDiagram": frozenset({"statediagram", "StateDiagram", "STATEDIAGRAM"}),
    "stateDiagram-v2": frozenset({"statediagram-v2", "StateDiagram-v2", "STATEDIAGRAM-V2"}),
    "erDiagram": frozenset({"erdiagram", "ErDiagram", "ERDiagram", "ERDIAGRAM"}),
    "journey": frozenset({"journey", "Journey"}),
    "gantt": frozenset({"gantt", "Gantt", "GANTT"}),
    "pie": frozenset({"pie", "Pie", "PIE"}),
    "quadrantChart": frozenset({"quadrantchart", "QuadrantChart"}),
    "requirementDiagram": frozenset({"requirementdiagram", "RequirementDiagram"}),
    "gitGraph": frozenset(
        {"gitgraph", "GitGraph", "GITGRAPH", "Gitgraph", "GITGraph", "gitgRAPH", "GITgraph"}
    ),
    "mindmap": frozenset({"mindmap", "MindMap", "Mindmap"}),
    "timeline": frozenset({"timeline", "Timeline"}),
    "zenuml": frozenset({"zenuml", "ZenUML"}),
    "sankey-beta": frozenset({"sankey-beta", "Sankey-beta"}),
    "xychart-beta": frozenset({"xychart-beta", "XYChart-beta"}),
    "block-beta": frozenset({"block-beta", "Block-beta"}),
    "packet-beta": frozenset({"packet-beta", "Packet-beta"}),
    "kanban": frozenset({"kanban", "Kanban"}),
    "architecture-beta": frozenset({"architecture-beta", "Architecture-beta"}),
}

# Keywords the fixer rewrites to their canonical spelling. The renderer only
# accepts these with exact casing.
FIXABLE_KEYWORDS = ("gitGraph", "sequenceDiagram", "classDiagram", "stateDiagram", "erDiagram")


def spellings(canonical: str) -> Tuple[str, ...]:
    """Canonical spelling first, then its known variants, longest first."""
    variants = sorted(DIAGRAM_KEYWORDS.get(canonical, ()), key=lambda v: (-len(v), v))
    return (canonical, *(v for v in variants if v != canonical))


def match_keyword(line: str) -> str | None:
    """Return the canonical keyword a diagram header line starts with."""
    lowered = line.strip().lower()
    if not lowered:
        return None
    for canonical in DIAGRAM_KEYWORDS:
        for name in {v.lower() for v in spellings(canonical)}:
            if lowered == name or lowered.startswith(name + " ") or lowered.startswith(name + "\t"):
                return canonical
    return None
