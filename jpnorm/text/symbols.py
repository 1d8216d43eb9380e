"""Symbol normalizer: maps Japanese punctuation variants to ASCII.

Purely table driven: one ``str.translate`` call, no positional logic.  The
katakana prolonged-sound mark ``ー`` (U+30FC) looks like a dash but is part
of words such as ``コーヒー`` and is intentionally absent from the table.
"""
from __future__ import annotations

_HYPHENS = (
    "\u2010"  # hyphen
    "\u2011"  # non-breaking hyphen
    "\u2012"  # figure dash
    "\u2013"  # en dash
    "\u2014"  # em dash
    "\u2015"  # horizontal bar
    "\u2212"  # minus sign
    "\ufe63"  # small hyphen-minus
    "\uff0d"  # full-width hyphen-minus
)

SYMBOL_TABLE: dict[str, str] = {
    **{h: "-" for h in _HYPHENS},
    # Wave dash and full-width tilde
    "〜": "~",
    "～": "~",
    # Middle dots collapse to U+00B7
    "・": "·",
    "･": "·",
    "！": "!",
    "？": "?",
    "（": "(",
    "）": ")",
    "、": ",",
    "。": ".",
}

_SYMBOL_TRANSLATION = str.maketrans(SYMBOL_TABLE)


def normalize_symbols(text: str) -> str:
    """Return *text* with every symbol in ``SYMBOL_TABLE`` substituted.

    ``"（テスト）－１！"`` becomes ``"(テスト)-１!"``; digits and letters are
    not touched here, width conversion is a separate stage.
    """
    return text.translate(_SYMBOL_TRANSLATION)
