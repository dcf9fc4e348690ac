from __future__ import annotations

import logging

from .detector import classify
from .fixer import fix_document
from .models import PreviewResult

logger = logging.getLogger(__name__)


def preview_document(text: str) -> PreviewResult:
    """Classify the text, then fix it, the way the editor does on every change."""
    classification = classify(text)
    outcome = fix_document(text, classification.is_bare_diagram)
    if outcome.was_modified:
        logger.info(
            "preview: kind=%s blocks=%d fixes=%d",
            classification.kind.value,
            classification.diagram_block_count,
            len(outcome.applied_fixes),
        )
    else:
        logger.debug("preview: kind=%s unchanged", classification.kind.value)
    return PreviewResult(classification=classification, outcome=outcome)
