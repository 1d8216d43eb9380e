"""Configurable text normalization pipeline.

``normalize_text`` applies the stages below in this order, skipping any
stage whose option is off.  The order is fixed regardless of which options
are enabled:

1. kana script: katakana -> hiragana, or hiragana -> katakana
2. kana width (up): half-width katakana -> full-width
3. kana width (down): full-width katakana -> half-width
4. alphanumeric width: full-width ASCII variants -> ASCII
5. space width: U+3000 -> ASCII space
6. collapse: whitespace runs -> one ASCII space
7. trim: strip leading / trailing whitespace
8. symbols: punctuation table (``normalize_symbols``)

Stages 2 and 3 are not mutually exclusive.  With both enabled, stage 2 runs
and stage 3 immediately undoes it, so the net effect on kana is a
conversion to half-width.  The remaining stages still run afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass

from jpnorm.text.kana import (
    to_hankaku_alphanumeric,
    to_hankaku_katakana,
    to_hiragana,
    to_katakana,
    to_zenkaku_katakana,
)
from jpnorm.text.space import collapse_spaces, normalize_spaces, trim_all
from jpnorm.text.symbols import normalize_symbols


@dataclass(frozen=True)
class NormalizationOptions:
    """Stage switches for :func:`normalize_text`.

    The defaults produce the canonical storage form: ASCII letters and
    digits, full-width katakana, single spaces, no edge whitespace and
    ASCII punctuation.

    Attributes
    ----------
    to_hankaku_alphanumeric:  Narrow full-width letters, digits, punctuation.
    to_hankaku_katakana:      Narrow full-width katakana (off by default).
    to_zenkaku_katakana:      Widen half-width katakana, fusing ﾞ / ﾟ.
    to_hiragana:              Katakana -> hiragana.  Wins over to_katakana.
    to_katakana:              Hiragana -> katakana.
    trim:                     Strip leading / trailing whitespace.
    collapse_spaces:          Collapse whitespace runs to one space.
    normalize_spaces:         Full-width space -> ASCII space.
    normalize_symbols:        Apply the symbol table.
    """

    to_hankaku_alphanumeric: bool = True
    to_hankaku_katakana: bool = False
    to_zenkaku_katakana: bool = True
    to_hiragana: bool = False
    to_katakana: bool = False
    trim: bool = True
    collapse_spaces: bool = True
    normalize_spaces: bool = True
    normalize_symbols: bool = True


DEFAULT_OPTIONS = NormalizationOptions()


def normalize_text(text: str, options: NormalizationOptions | None = None) -> str:
    """Return *text* normalized according to *options*.

    Parameters
    ----------
    text:
        Any string.  Characters outside the kana / ASCII blocks pass
        through every stage unchanged.
    options:
        Stage switches.  ``None`` means :data:`DEFAULT_OPTIONS`.

    Returns
    -------
    str
        The normalized string.  Whitespace-only input returns ``""`` under
        the default options.
    """
    opts = options if options is not None else DEFAULT_OPTIONS
    result = text

    if opts.to_hiragana:
        result = to_hiragana(result)
    elif opts.to_katakana:
        result = to_katakana(result)

    if opts.to_zenkaku_katakana:
        result = to_zenkaku_katakana(result)
    if opts.to_hankaku_katakana:
        result = to_hankaku_katakana(result)

    if opts.to_hankaku_alphanumeric:
        result = to_hankaku_alphanumeric(result)

    if opts.normalize_spaces:
        result = normalize_spaces(result)
    if opts.collapse_spaces:
        result = collapse_spaces(result)
    if opts.trim:
        result = trim_all(result)

    if opts.normalize_symbols:
        result = normalize_symbols(result)

    return result
