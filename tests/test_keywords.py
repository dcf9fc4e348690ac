from __future__ import annotations

from mdpreview.fixer import fix_one
from mdpreview.keywords import DIAGRAM_KEYWORDS, FIXABLE_KEYWORDS, match_keyword, spellings


def test_spellings_start_with_canonical():
    assert spellings("gitGraph")[0] == "gitGraph"
    assert set(spellings("gitGraph")) >= DIAGRAM_KEYWORDS["gitGraph"]


def test_every_listed_variant_is_recognized():
    for canonical, variants in DIAGRAM_KEYWORDS.items():
        for variant in variants:
            assert match_keyword(variant) == canonical


def test_every_listed_variant_of_a_fixable_keyword_is_rewritten():
    for canonical in FIXABLE_KEYWORDS:
        for variant in DIAGRAM_KEYWORDS[canonical]:
            outcome = fix_one(f"{variant}\n  x")
            assert outcome.corrected_text == f"{canonical}\n  x"
            assert outcome.was_modified is (variant != canonical)


def test_new_table_entry_is_recognized(monkeypatch):
    monkeypatch.setitem(DIAGRAM_KEYWORDS, "c4Context", frozenset({"c4context", "C4Context"}))
    assert match_keyword("C4CONTEXT") == "c4Context"
