"""Repair well-known Mermaid syntax mistakes before rendering.

``fix_one`` works on a single diagram body; ``fix_document`` finds the
diagram bodies of a whole document (or wraps a bare diagram) and delegates.
Every rule is a regex rewrite that records one description when, and only
when, it changed the text.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Pattern, Tuple

from .fences import DIAGRAM_BLOCK_RE, WRAP_FIX, wrap_in_fence
from .keywords import FIXABLE_KEYWORDS, spellings
from .models import FixOutcome

logger = logging.getLogger(__name__)

INVISIBLE_RE = re.compile("[\u200b\u200c\u200d\u2060\ufeff]")


def _keyword_pattern(canonical: str) -> Pattern[str]:
    names = "|".join(re.escape(name) for name in spellings(canonical))
    return re.compile(rf"\A(?P<indent>\s*)(?P<keyword>{names})\b", re.IGNORECASE)


KEYWORD_RES: Dict[str, Pattern[str]] = {canonical: _keyword_pattern(canonical) for canonical in FIXABLE_KEYWORDS}

TAG_ON_NEXT_LINE_RE = re.compile(
    r'^(?P<head>[ \t]*(?:commit|merge)\b[^\r\n]*)[\r\n]+[ \t]*(?P<clause>tag:[ \t]*"[^"]*")',
    re.MULTILINE,
)
TYPE_ON_NEXT_LINE_RE = re.compile(
    r"^(?P<head>[ \t]*commit\b[^\r\n]*)[\r\n]+[ \t]*(?P<clause>type:[ \t]*\w+)",
    re.MULTILINE,
)


def _join_clause(match: re.Match[str]) -> str:
    return f"{match.group('head').rstrip()} {match.group('clause')}"


def _merge_message(keyword: str, count: int) -> str:
    return f'Moved "{keyword}:" to same line as "commit" ({count} fix{"es" if count > 1 else ""})'


def strip_invisible(code: str) -> Tuple[str, bool]:
    cleaned = INVISIBLE_RE.sub("", code)
    return cleaned, cleaned != code


def normalize_keyword(code: str) -> Tuple[str, str | None]:
    """Rewrite a miscased diagram keyword on the first line.

    Returns the new text and the fix description, or ``None`` when the
    keyword was missing or already canonical.
    """
    for canonical, pattern in KEYWORD_RES.items():
        match = pattern.match(code)
        if not match:
            continue
        found = match.group("keyword")
        if found == canonical:
            return code, None
        fixed = code[: match.start("keyword")] + canonical + code[match.end("keyword") :]
        return fixed, f'Fixed capitalization: "{found}" → "{canonical}"'
    return code, None


def merge_clauses(code: str) -> Tuple[str, int, int]:
    """Pull ``tag:``/``type:`` clauses up onto their commit lines.

    Both rewrites run until neither changes anything, so a clause that only
    becomes adjacent to its commit after the other merge is still picked up.
    """
    tag_count = 0
    type_count = 0
    while True:
        code, tags = TAG_ON_NEXT_LINE_RE.subn(_join_clause, code)
        code, types = TYPE_ON_NEXT_LINE_RE.subn(_join_clause, code)
        tag_count += tags
        type_count += types
        if not tags and not types:
            return code, tag_count, type_count


def fix_one(source: str) -> FixOutcome:
    fixes: List[str] = []
    code = source or ""

    code, had_invisible = strip_invisible(code)
    if had_invisible:
        fixes.append("Removed invisible characters (BOM/zero-width)")

    code, keyword_fix = normalize_keyword(code)
    if keyword_fix:
        fixes.append(keyword_fix)

    code, tag_count, type_count = merge_clauses(code)
    if tag_count:
        fixes.append(_merge_message("tag", tag_count))
    if type_count:
        fixes.append(_merge_message("type", type_count))

    if fixes:
        logger.debug("diagram fixes applied: %s", "; ".join(fixes))
    return FixOutcome(corrected_text=code, applied_fixes=tuple(fixes), was_modified=bool(fixes))


def fix_document(text: str, treat_as_bare_diagram: bool) -> FixOutcome:
    text = text or ""
    if treat_as_bare_diagram:
        inner = fix_one(text)
        return FixOutcome(
            corrected_text=wrap_in_fence(inner.corrected_text),
            applied_fixes=(WRAP_FIX, *inner.applied_fixes),
            was_modified=True,
        )

    fixes: List[str] = []

    def _replace(match: re.Match[str]) -> str:
        outcome = fix_one(match.group("body"))
        if not outcome.was_modified:
            return match.group(0)
        fixes.extend(outcome.applied_fixes)
        return match.group("open") + outcome.corrected_text + match.group("close")

    corrected = DIAGRAM_BLOCK_RE.sub(_replace, text)
    return FixOutcome(corrected_text=corrected, applied_fixes=tuple(fixes), was_modified=bool(fixes))
