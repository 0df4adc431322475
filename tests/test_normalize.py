from __future__ import annotations

from services.normalize import strip_accents


def test_strip_accents_folds_combining_marks() -> None:
    assert strip_accents("São Paulo") == "Sao Paulo"
    assert strip_accents("Florianópolis") == "Florianopolis"
    assert strip_accents("Maceió") == "Maceio"


def test_strip_accents_leaves_plain_text_untouched() -> None:
    assert strip_accents("Rio de Janeiro") == "Rio de Janeiro"
    assert strip_accents("") == ""
