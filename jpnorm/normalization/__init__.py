"""Normalization package.

One normalizer per Japanese form field type.  Each takes a raw string and
returns a canonical form that is safe to store or compare::

    def normalize(raw: str, options=None) -> str:
        ...

``normalize_email`` is the exception: it returns an ``EmailNormalization``
carrying the corrected address and the list of edits applied.

None of the normalizers raise on string input.
"""
