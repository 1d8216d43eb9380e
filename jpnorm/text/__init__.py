"""Core text conversions.

``kana``      character-class converters (width, script, voicing fusion)
``space``     whitespace normalizers
``symbols``   punctuation substitution table
``pipeline``  ``normalize_text`` and its stage options
"""
