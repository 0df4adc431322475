from __future__ import annotations

import unicodedata


def strip_accents(text: str) -> str:
    """Drop combining marks so ``"São Paulo"`` becomes ``"Sao Paulo"``."""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", stripped)
