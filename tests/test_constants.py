"""Tests for the conversion tables and the code-point constants behind them.

Covers:
- Offsets agree with the block bounds they are applied to
- Every katakana table is injective (no two sources share a target)
- The voicing-mark fusion set is closed and covers both directions
- Every table key lies inside its declared Unicode block
"""
from __future__ import annotations

import unicodedata

import pytest

from jpnorm.core.constants import (
    FULLWIDTH_ASCII_END,
    FULLWIDTH_ASCII_START,
    FULLWIDTH_OFFSET,
    HALFWIDTH_KATAKANA_END,
    HALFWIDTH_KATAKANA_START,
    HALFWIDTH_SEMI_VOICED_MARK,
    HALFWIDTH_VOICED_MARK,
    HIRAGANA_END,
    HIRAGANA_START,
    KANA_OFFSET,
    KATAKANA_END,
    KATAKANA_START,
    VOICING_MARKS,
)
from jpnorm.text.kana import DIACRITIC_FUSION, HALFWIDTH_TO_FULLWIDTH, to_hankaku_katakana


class TestOffsets:
    def test_fullwidth_block_maps_onto_printable_ascii(self) -> None:
        assert FULLWIDTH_ASCII_START - FULLWIDTH_OFFSET == ord("!")
        assert FULLWIDTH_ASCII_END - FULLWIDTH_OFFSET == ord("~")

    def test_kana_blocks_are_offset_copies(self) -> None:
        assert KATAKANA_START - HIRAGANA_START == KANA_OFFSET
        assert KATAKANA_END - HIRAGANA_END == KANA_OFFSET

    def test_marks_are_in_halfwidth_block(self) -> None:
        for mark in VOICING_MARKS:
            assert HALFWIDTH_KATAKANA_START <= ord(mark) <= HALFWIDTH_KATAKANA_END


class TestOneToOneTable:
    def test_injective(self) -> None:
        targets = list(HALFWIDTH_TO_FULLWIDTH.values())
        assert len(targets) == len(set(targets))

    @pytest.mark.parametrize("half", sorted(HALFWIDTH_TO_FULLWIDTH))
    def test_keys_in_halfwidth_block(self, half: str) -> None:
        assert HALFWIDTH_KATAKANA_START <= ord(half) <= HALFWIDTH_KATAKANA_END

    def test_marks_are_not_mapped_on_their_own(self) -> None:
        assert not VOICING_MARKS & set(HALFWIDTH_TO_FULLWIDTH)

    def test_covers_basic_syllabary(self) -> None:
        # 46 base syllables + 9 small kana + 6 punctuation marks
        assert len(HALFWIDTH_TO_FULLWIDTH) == 61


class TestDiacriticFusion:
    def test_injective(self) -> None:
        fused = list(DIACRITIC_FUSION.values())
        assert len(fused) == len(set(fused))

    def test_fused_forms_disjoint_from_plain_forms(self) -> None:
        assert not set(DIACRITIC_FUSION.values()) & set(HALFWIDTH_TO_FULLWIDTH.values())

    def test_every_base_has_a_plain_mapping(self) -> None:
        for base, _mark in DIACRITIC_FUSION:
            assert base in HALFWIDTH_TO_FULLWIDTH

    def test_only_halfwidth_marks_used(self) -> None:
        assert {mark for _base, mark in DIACRITIC_FUSION} == {
            HALFWIDTH_VOICED_MARK,
            HALFWIDTH_SEMI_VOICED_MARK,
        }

    def test_counts(self) -> None:
        voiced = [k for k in DIACRITIC_FUSION if k[1] == HALFWIDTH_VOICED_MARK]
        semi = [k for k in DIACRITIC_FUSION if k[1] == HALFWIDTH_SEMI_VOICED_MARK]
        # ガ–ゴ, ザ–ゾ, ダ–ド, バ–ボ, ヴ, ヷ, ヺ
        assert len(voiced) == 23
        # パ–ポ
        assert len(semi) == 5

    @pytest.mark.parametrize(("pair", "fused"), sorted(DIACRITIC_FUSION.items()))
    def test_reverse_direction(self, pair: tuple[str, str], fused: str) -> None:
        assert to_hankaku_katakana(fused) == "".join(pair)

    def test_every_representable_voiced_katakana_is_covered(self) -> None:
        # Full-width katakana that decompose to base + voicing mark, where the
        # base itself has a half-width form (ヸ and ヹ do not).
        halfwidth_bases = set(HALFWIDTH_TO_FULLWIDTH.values())
        expected = set()
        for cp in range(KATAKANA_START, 0x30FB):
            parts = unicodedata.decomposition(chr(cp)).split()
            if len(parts) == 2 and parts[1] in ("3099", "309A"):
                if chr(int(parts[0], 16)) in halfwidth_bases:
                    expected.add(chr(cp))
        assert expected == set(DIACRITIC_FUSION.values())
