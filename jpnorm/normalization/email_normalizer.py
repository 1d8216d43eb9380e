"""Email normalizer.

Repairs the mistakes Japanese IME input typically introduces into email
addresses: full-width ``＠`` and ``．``, stray edge whitespace, mixed case,
and a short list of misspelled webmail domains.  Every edit that changes
the address is reported back as a :class:`CorrectionSuggestion` so a form
can show "did you mean ...?" instead of silently rewriting.

The address is not validated; ``"test@@gmail.com"`` or ``"@gmail.com"``
come back with only the mechanical fixes applied.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging

from jpnorm.normalization.models import (
    CorrectionSuggestion,
    EmailNormalization,
    EmailOptions,
)
from jpnorm.text.space import trim_all

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = EmailOptions()

# Misspelled domain -> correct domain.  Matched as a substring after
# lower-casing, first occurrence only.
COMMON_DOMAIN_TYPOS: dict[str, str] = {
    "gamil.com": "gmail.com",
    "gmai.com": "gmail.com",
    "gmial.com": "gmail.com",
    "yahooo.co.jp": "yahoo.co.jp",
    "yhaoo.co.jp": "yahoo.co.jp",
    "hotmial.com": "hotmail.com",
    "outlok.com": "outlook.com",
}

# Full-width character -> ASCII replacement, with the reason reported.
_WIDTH_FIXES: tuple[tuple[str, str, str], ...] = (
    ("＠", "@", "converted full-width @ to half-width @"),
    ("．", ".", "converted full-width . to half-width ."),
)


def normalize_email(raw: str, options: EmailOptions | None = None) -> EmailNormalization:
    """Return the normalized address of *raw* and the edits applied.

    Parameters
    ----------
    raw:
        Raw email string as typed.
    options:
        ``to_lower_case`` lower-cases the whole address; ``fix_common_typos``
        rewrites domains listed in :data:`COMMON_DOMAIN_TYPOS`.  ``None``
        means the defaults (both on).

    Returns
    -------
    EmailNormalization
        ``email`` is the corrected address.  ``suggestions`` lists each
        width fix (confidence ``"high"``) and each typo fix (confidence
        ``"medium"``) in the order applied.  Trimming and lower-casing are
        not reported.  The first suggestion's ``original`` is *raw* exactly
        as typed, edge whitespace included.
    """
    opts = options if options is not None else _DEFAULT_OPTIONS
    suggestions: list[CorrectionSuggestion] = []

    result = trim_all(raw)

    for wide, narrow, reason in _WIDTH_FIXES:
        if wide in result:
            fixed = result.replace(wide, narrow)
            suggestions.append(
                CorrectionSuggestion(
                    original=result if suggestions else raw,
                    corrected=fixed,
                    confidence="high",
                    reason=reason,
                )
            )
            result = fixed

    if opts.to_lower_case:
        result = result.lower()

    if "@" not in result:
        logger.debug("normalize_email: no '@' found (length=%d)", len(result))

    if opts.fix_common_typos:
        for wrong, correct in COMMON_DOMAIN_TYPOS.items():
            if wrong not in result:
                continue
            fixed = result.replace(wrong, correct, 1)
            suggestions.append(
                CorrectionSuggestion(
                    original=result,
                    corrected=fixed,
                    confidence="medium",
                    reason=f"corrected {wrong} to {correct}",
                )
            )
            logger.debug("normalize_email: applied typo fix %s -> %s", wrong, correct)
            result = fixed

    return EmailNormalization(email=result, suggestions=suggestions)
