from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class ContentKind(str, Enum):
    EMPTY = "empty"
    DIAGRAM = "diagram"
    MIXED = "mixed"
    PROSE = "prose"


@dataclass(frozen=True, slots=True)
class PresentationHints:
    """Badge metadata for the shell. Opaque to the core."""

    label: str
    code: str
    foreground: str
    background: str
    border: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    kind: ContentKind
    reason: str
    diagram_block_count: int
    hints: PresentationHints
    fixes_preview: Tuple[str, ...] = ()

    @property
    def is_bare_diagram(self) -> bool:
        return self.kind is ContentKind.DIAGRAM

    def to_payload(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "reason": self.reason,
            "diagram_block_count": self.diagram_block_count,
            "label": self.hints.label,
            "code": self.hints.code,
            "foreground": self.hints.foreground,
            "background": self.hints.background,
            "border": self.hints.border,
            "description": self.hints.description,
            "fixes_preview": list(self.fixes_preview),
        }


@dataclass(frozen=True, slots=True)
class FixOutcome:
    corrected_text: str
    applied_fixes: Tuple[str, ...] = ()
    was_modified: bool = False

    def to_payload(self) -> Dict[str, Any]:
        return {
            "corrected_text": self.corrected_text,
            "applied_fixes": list(self.applied_fixes),
            "was_modified": self.was_modified,
        }


@dataclass(frozen=True, slots=True)
class PreviewResult:
    classification: ClassificationResult
    outcome: FixOutcome

    @property
    def text(self) -> str:
        return self.outcome.corrected_text

    @property
    def fixes(self) -> Tuple[str, ...]:
        return self.outcome.applied_fixes

    def to_payload(self) -> Dict[str, Any]:
        return {
            "classification": self.classification.to_payload(),
            "outcome": self.outcome.to_payload(),
        }
