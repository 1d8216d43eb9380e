"""Whitespace normalizers.

"Whitespace" is whatever ``\\s`` matches on a ``str`` pattern (Unicode
whitespace, so tab, newline and NBSP included) plus the ideographic space
U+3000, named explicitly, and the byte order mark U+FEFF, which ``\\s``
omits but which leads text pasted from UTF-8 CSV exports.

Every function here is total and idempotent.
"""
from __future__ import annotations

import re

from jpnorm.core.constants import IDEOGRAPHIC_SPACE

_EDGE_SPACE_RE = re.compile(r"\A[\s\u3000\ufeff]+|[\s\u3000\ufeff]+\Z")
_SPACE_RUN_RE = re.compile(r"[\s\u3000\ufeff]+")


def trim_all(text: str) -> str:
    """Strip leading and trailing whitespace, full-width space included."""
    return _EDGE_SPACE_RE.sub("", text)


def collapse_spaces(text: str) -> str:
    """Replace every run of whitespace with one ASCII space."""
    return _SPACE_RUN_RE.sub(" ", text)


def normalize_spaces(text: str) -> str:
    """Replace each full-width space with an ASCII space.

    Run lengths are preserved: ``"a　　b"`` becomes ``"a  b"``.
    """
    return text.replace(IDEOGRAPHIC_SPACE, " ")


def remove_all_spaces(text: str) -> str:
    """Delete every whitespace character."""
    return _SPACE_RUN_RE.sub("", text)
