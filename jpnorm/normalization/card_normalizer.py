"""Payment card number formatter.

Groups the digits of a card number in fours for display.  The length is
not checked and no Luhn validation is done: 13-, 15-, 16- and 19-digit
numbers all group the same way, the last group taking whatever is left.
"""
from __future__ import annotations

import re

from jpnorm.text.kana import to_hankaku_alphanumeric

_NON_DIGIT_RE = re.compile(r"[^0-9]")
# A run of four digits that is not the end of the number.
_GROUP_RE = re.compile(r"([0-9]{4})(?=[0-9])")


def format_credit_card(raw: str) -> str:
    """Return the digits of *raw* grouped as ``"1234 5678 9012 3456"``.

    ``"1234567890123"`` becomes ``"1234 5678 9012 3"``.  Empty or
    digit-free input returns ``""``.
    """
    digits = _NON_DIGIT_RE.sub("", to_hankaku_alphanumeric(raw))
    return _GROUP_RE.sub(r"\1 ", digits)
