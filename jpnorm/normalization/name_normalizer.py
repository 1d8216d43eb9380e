"""Name normalizer.

Converts a raw Japanese person name to the form used for storage and
duplicate matching.

Rules applied in order
----------------------
1. Half-width katakana -> full-width (``ﾔﾏﾀﾞ`` -> ``ヤマダ``), optional.
2. Strip leading / trailing whitespace, full-width space included.
3. Full-width spaces -> ASCII spaces.
4. Collapse internal runs of whitespace.
5. Remove all remaining whitespace, optional (on by default), so that
   ``"山田 太郎"`` and ``"山田太郎"`` compare equal.

Kanji, hiragana and variant forms (``髙``, ``齋``) are never altered.
"""
from __future__ import annotations

from jpnorm.normalization.models import NameOptions
from jpnorm.text.kana import to_zenkaku_katakana
from jpnorm.text.space import (
    collapse_spaces,
    normalize_spaces,
    remove_all_spaces,
    trim_all,
)

_DEFAULT_OPTIONS = NameOptions()


def normalize_name(raw: str, options: NameOptions | None = None) -> str:
    """Return *raw* in canonical name form.

    Parameters
    ----------
    raw:
        Raw person name as typed.
    options:
        ``to_zenkaku`` widens half-width katakana; ``remove_spaces`` drops
        the separator between family and given name.  ``None`` means the
        defaults (both on).

    Returns
    -------
    str
        Canonical form, or ``""`` for empty / whitespace-only input.
    """
    opts = options if options is not None else _DEFAULT_OPTIONS
    result = raw

    if opts.to_zenkaku:
        result = to_zenkaku_katakana(result)

    result = trim_all(result)
    result = normalize_spaces(result)
    result = collapse_spaces(result)

    if opts.remove_spaces:
        result = remove_all_spaces(result)

    return result
