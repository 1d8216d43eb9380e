"""Number normalizer: digit strings ready for ``int()`` / ``Decimal()``."""
from __future__ import annotations

import re

from jpnorm.text.kana import to_hankaku_alphanumeric

# ASCII comma, full-width comma (before narrowing, for callers that skip it)
_SEPARATOR_RE = re.compile(r"[,，]")
_SPACE_RE = re.compile(r"\s")


def normalize_number(raw: str) -> str:
    """Return *raw* with width narrowed and thousands separators removed.

    ``"１，２３４"`` becomes ``"1234"``.  Signs, decimal points and currency
    symbols are left for the caller; nothing is validated.
    """
    result = to_hankaku_alphanumeric(raw)
    result = _SEPARATOR_RE.sub("", result)
    return _SPACE_RE.sub("", result)
