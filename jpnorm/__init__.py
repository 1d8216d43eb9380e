"""jpnorm: normalization of Japanese form and search text."""
from jpnorm.normalization.card_normalizer import format_credit_card
from jpnorm.normalization.email_normalizer import normalize_email
from jpnorm.normalization.models import (
    CorrectionSuggestion,
    EmailNormalization,
    EmailOptions,
    NameOptions,
    PhoneOptions,
)
from jpnorm.normalization.name_normalizer import normalize_name
from jpnorm.normalization.number_normalizer import normalize_number
from jpnorm.normalization.phone_normalizer import normalize_phone
from jpnorm.normalization.postal_normalizer import normalize_postal_code
from jpnorm.text.kana import (
    to_hankaku_alphanumeric,
    to_hankaku_katakana,
    to_hiragana,
    to_katakana,
    to_zenkaku_alphanumeric,
    to_zenkaku_katakana,
)
from jpnorm.text.pipeline import NormalizationOptions, normalize_text
from jpnorm.text.space import (
    collapse_spaces,
    normalize_spaces,
    remove_all_spaces,
    trim_all,
)
from jpnorm.text.symbols import normalize_symbols

__all__ = [
    "CorrectionSuggestion",
    "EmailNormalization",
    "EmailOptions",
    "NameOptions",
    "NormalizationOptions",
    "PhoneOptions",
    "collapse_spaces",
    "format_credit_card",
    "normalize_email",
    "normalize_name",
    "normalize_number",
    "normalize_phone",
    "normalize_postal_code",
    "normalize_spaces",
    "normalize_symbols",
    "normalize_text",
    "remove_all_spaces",
    "to_hankaku_alphanumeric",
    "to_hankaku_katakana",
    "to_hiragana",
    "to_katakana",
    "to_zenkaku_alphanumeric",
    "to_zenkaku_katakana",
    "trim_all",
]
