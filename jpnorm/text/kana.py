"""Character-class converters: full/half width and katakana/hiragana.

Each public function converts in one direction only and has the same
contract::

    def convert(text: str) -> str:
        ...

Characters outside a function's source block are returned unchanged, so
every converter is total over arbitrary strings (emoji, kanji, combining
marks and astral-plane characters included).

Width and script conversions that are a pure code-point shift are built as
``str.translate`` tables over the block.  Katakana width conversion is
table driven because the half-width block is not laid out in the same order
as the full-width one and because voiced sounds are one character in
full-width but two in half-width.
"""
from __future__ import annotations

import string

from jpnorm.core.constants import (
    FULLWIDTH_ASCII_END,
    FULLWIDTH_ASCII_START,
    FULLWIDTH_OFFSET,
    HALFWIDTH_SEMI_VOICED_MARK,
    HALFWIDTH_VOICED_MARK,
    HIRAGANA_END,
    HIRAGANA_START,
    KANA_OFFSET,
    KATAKANA_END,
    KATAKANA_START,
    VOICING_MARKS,
)

# ---------------------------------------------------------------------------
# Alphanumeric width tables
# ---------------------------------------------------------------------------

# Every full-width ASCII variant (！ through ～) narrows.
_TO_HANKAKU_ALNUM: dict[int, int] = {
    cp: cp - FULLWIDTH_OFFSET
    for cp in range(FULLWIDTH_ASCII_START, FULLWIDTH_ASCII_END + 1)
}

# Only letters and digits widen; ASCII punctuation stays narrow.
_TO_ZENKAKU_ALNUM: dict[int, int] = {
    ord(c): ord(c) + FULLWIDTH_OFFSET
    for c in string.ascii_letters + string.digits
}

# ---------------------------------------------------------------------------
# Katakana width tables
# ---------------------------------------------------------------------------

_HALFWIDTH_KANA = (
    "ｱｲｳｴｵｶｷｸｹｺｻｼｽｾｿﾀﾁﾂﾃﾄﾅﾆﾇﾈﾉﾊﾋﾌﾍﾎﾏﾐﾑﾒﾓﾔﾕﾖﾗﾘﾙﾚﾛﾜｦﾝ"
    "ｧｨｩｪｫｯｬｭｮ"
    "｡､ｰ｢｣･"
)
_FULLWIDTH_KANA = (
    "アイウエオカキクケコサシスセソタチツテトナニヌネノハヒフヘホマミムメモヤユヨラリルレロワヲン"
    "ァィゥェォッャュョ"
    "。、ー「」・"
)

# One-to-one pairs (no voicing involved).
HALFWIDTH_TO_FULLWIDTH: dict[str, str] = dict(zip(_HALFWIDTH_KANA, _FULLWIDTH_KANA))

_VOICED_BASES = "ｶｷｸｹｺｻｼｽｾｿﾀﾁﾂﾃﾄﾊﾋﾌﾍﾎｳﾜｦ"
_VOICED_FORMS = "ガギグゲゴザジズゼゾダヂヅデドバビブベボヴヷヺ"
_SEMI_VOICED_BASES = "ﾊﾋﾌﾍﾎ"
_SEMI_VOICED_FORMS = "パピプペポ"

# (base, mark) -> fused full-width character.  Closed set: a base that is
# not listed here never fuses, whatever follows it.
DIACRITIC_FUSION: dict[tuple[str, str], str] = {
    **{
        (base, HALFWIDTH_VOICED_MARK): fused
        for base, fused in zip(_VOICED_BASES, _VOICED_FORMS)
    },
    **{
        (base, HALFWIDTH_SEMI_VOICED_MARK): fused
        for base, fused in zip(_SEMI_VOICED_BASES, _SEMI_VOICED_FORMS)
    },
}

# Full-width -> half-width, one or two output characters per key.  Voiced
# forms decompose into base + mark; the rest is the inverse one-to-one map.
_TO_HANKAKU_KANA: dict[int, str] = {
    **{ord(full): half for half, full in HALFWIDTH_TO_FULLWIDTH.items()},
    **{ord(fused): base + mark for (base, mark), fused in DIACRITIC_FUSION.items()},
}

# ---------------------------------------------------------------------------
# Script tables
# ---------------------------------------------------------------------------

_TO_HIRAGANA: dict[int, int] = {
    cp: cp - KANA_OFFSET for cp in range(KATAKANA_START, KATAKANA_END + 1)
}
_TO_KATAKANA: dict[int, int] = {
    cp: cp + KANA_OFFSET for cp in range(HIRAGANA_START, HIRAGANA_END + 1)
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def to_hankaku_alphanumeric(text: str) -> str:
    """Narrow full-width letters, digits and ASCII punctuation.

    ``"ＡＢＣ１２３！"`` becomes ``"ABC123!"``.  Every code point in
    U+FF01–U+FF5E is shifted down by ``0xFEE0``.
    """
    return text.translate(_TO_HANKAKU_ALNUM)


def to_zenkaku_alphanumeric(text: str) -> str:
    """Widen ASCII letters and digits.  Punctuation is left narrow."""
    return text.translate(_TO_ZENKAKU_ALNUM)


def to_hankaku_katakana(text: str) -> str:
    """Convert full-width katakana (and Japanese punctuation) to half-width.

    Voiced and semi-voiced characters decompose into two characters, the
    half-width base followed by ``ﾞ`` or ``ﾟ``: ``"ガ"`` becomes ``"ｶﾞ"``.
    """
    return text.translate(_TO_HANKAKU_KANA)


def to_zenkaku_katakana(text: str) -> str:
    """Convert half-width katakana to full-width, fusing voicing marks.

    The input is scanned once, left to right, with one character of
    lookahead.  A base followed by its matching mark is emitted as the
    single fused character (``"ｶﾞ"`` -> ``"ガ"``); any other character is
    mapped one-to-one or passed through.  A mark with no base in front of
    it, or after a base that has no such form (``"ｱﾞ"``), is left as is.
    """
    out: list[str] = []
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if i + 1 < length and text[i + 1] in VOICING_MARKS:
            fused = DIACRITIC_FUSION.get((char, text[i + 1]))
            if fused is not None:
                out.append(fused)
                i += 2
                continue
        out.append(HALFWIDTH_TO_FULLWIDTH.get(char, char))
        i += 1
    return "".join(out)


def to_hiragana(text: str) -> str:
    """Shift katakana (ァ–ヶ) down into the hiragana block."""
    return text.translate(_TO_HIRAGANA)


def to_katakana(text: str) -> str:
    """Shift hiragana (ぁ–ゖ) up into the katakana block."""
    return text.translate(_TO_KATAKANA)
