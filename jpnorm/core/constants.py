"""Unicode block bounds and offsets used by the character-class converters.

Every conversion in ``jpnorm.text`` is defined either as a fixed offset
applied inside one contiguous block, or as a lookup table keyed by single
characters.  The offsets and block bounds live here so the tables and the
tests agree on one set of numbers.

Blocks
------
FULLWIDTH_ASCII    U+FF01–U+FF5E   ！ … ～ (full-width forms of 0x21–0x7E)
HALFWIDTH_KATAKANA U+FF61–U+FF9F   ｡ … ﾟ
KATAKANA           U+30A1–U+30F6   ァ … ヶ (range shifted by the kana offset)
HIRAGANA           U+3041–U+3096   ぁ … ゖ
"""
from __future__ import annotations

# ---------------------------------------------------------------------------
# Full-width / half-width ASCII
# ---------------------------------------------------------------------------

FULLWIDTH_ASCII_START = 0xFF01
FULLWIDTH_ASCII_END = 0xFF5E

# U+FF01 (！) - 0xFEE0 == 0x21 (!)
FULLWIDTH_OFFSET = 0xFEE0

IDEOGRAPHIC_SPACE = "\u3000"

# ---------------------------------------------------------------------------
# Kana blocks
# ---------------------------------------------------------------------------

HIRAGANA_START = 0x3041
HIRAGANA_END = 0x3096

KATAKANA_START = 0x30A1
KATAKANA_END = 0x30F6

# ア (U+30A2) - あ (U+3042)
KANA_OFFSET = 0x60

HALFWIDTH_KATAKANA_START = 0xFF61
HALFWIDTH_KATAKANA_END = 0xFF9F

# ---------------------------------------------------------------------------
# Voicing marks
# ---------------------------------------------------------------------------

HALFWIDTH_VOICED_MARK = "\uff9e"  # ﾞ
HALFWIDTH_SEMI_VOICED_MARK = "\uff9f"  # ﾟ

VOICING_MARKS: frozenset[str] = frozenset({
    HALFWIDTH_VOICED_MARK,
    HALFWIDTH_SEMI_VOICED_MARK,
})
