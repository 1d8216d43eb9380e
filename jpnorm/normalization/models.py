"""Option and result records shared by the preset normalizers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Confidence = Literal["high", "medium", "low"]


@dataclass(frozen=True)
class CorrectionSuggestion:
    """One corrective edit applied by :func:`normalize_email`.

    Attributes
    ----------
    original:    The string before this edit.
    corrected:   The string after this edit.
    confidence:  ``"high"`` for mechanical width fixes, ``"medium"`` for
                 typo-table rewrites.
    reason:      Human-readable description of the edit.
    """
    original: str
    corrected: str
    confidence: Confidence
    reason: str


@dataclass(frozen=True)
class EmailNormalization:
    """Result of :func:`normalize_email`."""
    email: str
    suggestions: list[CorrectionSuggestion] = field(default_factory=list)


@dataclass(frozen=True)
class PhoneOptions:
    add_hyphens: bool = True
    remove_hyphens: bool = False
    to_hankaku: bool = True


@dataclass(frozen=True)
class EmailOptions:
    fix_common_typos: bool = True
    to_lower_case: bool = True


@dataclass(frozen=True)
class NameOptions:
    # Remove the space between family and given name ("山田 太郎" -> "山田太郎").
    remove_spaces: bool = True
    to_zenkaku: bool = True
