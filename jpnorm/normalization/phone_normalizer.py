"""Phone number normalizer.

``normalize_phone`` returns the display / comparison form used by Japanese
forms: ASCII digits with hyphens re-inserted by fixed positional rules
(``090-1234-5678``, ``03-1234-5678``).  Never raises; input that matches
no rule comes back as plain digits.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
import re

from jpnorm.normalization.models import PhoneOptions
from jpnorm.text.kana import to_hankaku_alphanumeric

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = PhoneOptions()

# Already in international form: left exactly as typed.
_INTERNATIONAL_RE = re.compile(r"\+81[-0-9]+")

# ASCII hyphen, full-width hyphen-minus, Unicode hyphen
_HYPHEN_RE = re.compile(r"[-\uff0d\u2010]")
_NON_DIGIT_RE = re.compile(r"[^0-9+]")

# 070 / 080 / 090 + 8 digits
_MOBILE_RE = re.compile(r"(0[789]0)(\d{4})(\d{4})")
# 0 + 9 or 10 digits
_LANDLINE_RE = re.compile(r"0\d{9,10}")


def _group_landline(digits: str) -> str:
    if len(digits) == 10:
        return f"{digits[:2]}-{digits[2:6]}-{digits[6:]}"
    return f"{digits[:3]}-{digits[3:7]}-{digits[7:]}"


def normalize_phone(raw: str, options: PhoneOptions | None = None) -> str:
    """Return *raw* as a hyphenated Japanese phone number.

    Parameters
    ----------
    raw:
        Raw phone string, possibly full-width (``"０９０−１２３４−５６７８"``)
        or decorated (``"tel:(090)1234-5678"``).
    options:
        ``to_hankaku`` narrows full-width characters first;
        ``remove_hyphens`` returns bare digits; ``add_hyphens`` applies the
        grouping rules.  ``None`` means the defaults.

    Returns
    -------
    str
        * ``+81...`` input is returned unchanged.
        * Mobile (``070``/``080``/``090`` + 8 digits): ``3-4-4``.
        * 10-digit landline: ``2-4-4``; 11-digit landline: ``3-4-4``.
        * Anything else: the digits (and ``+``) only, ungrouped.
    """
    opts = options if options is not None else _DEFAULT_OPTIONS
    result = raw

    if opts.to_hankaku:
        result = to_hankaku_alphanumeric(result)

    if _INTERNATIONAL_RE.fullmatch(result):
        return result

    result = _HYPHEN_RE.sub("", result)
    result = _NON_DIGIT_RE.sub("", result)

    if opts.remove_hyphens or not opts.add_hyphens:
        return result

    m = _MOBILE_RE.fullmatch(result)
    if m:
        return "-".join(m.groups())
    if _LANDLINE_RE.fullmatch(result):
        return _group_landline(result)

    logger.debug("normalize_phone: no grouping rule matched (digits=%d)", len(result))
    return result
