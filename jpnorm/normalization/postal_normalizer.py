"""Japanese postal code normalizer.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
import re

from jpnorm.text.kana import to_hankaku_alphanumeric

logger = logging.getLogger(__name__)

_NON_DIGIT_RE = re.compile(r"[^0-9]")
_POSTAL_DIGITS = 7


def normalize_postal_code(raw: str) -> str:
    """Return *raw* as ``"NNN-NNNN"``, or as bare digits.

    Parameters
    ----------
    raw:
        Raw postal code, e.g. ``"〒１２３－４５６７"``.

    Returns
    -------
    str
        ``"123-4567"`` when exactly seven digits remain after narrowing and
        stripping; otherwise the digits alone, ungrouped (``"12345"``).
    """
    digits = _NON_DIGIT_RE.sub("", to_hankaku_alphanumeric(raw))

    if len(digits) != _POSTAL_DIGITS:
        logger.debug("normalize_postal_code: expected 7 digits (got=%d)", len(digits))
        return digits

    return f"{digits[:3]}-{digits[3:]}"
