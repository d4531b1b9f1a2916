"""Scalar value extraction from raw JSON text.

Values are located by a flat substring search for the quoted key, so no
parse tree is built and nesting is ignored: when the same key appears in
two objects the first occurrence wins. String values are returned without
escape processing, so an escaped quote ends the value early.
"""

from __future__ import annotations

from typing import Final

# Missing marker: the key is absent or its value could not be delimited.
MISSING: Final = None

_VALUE_TERMINATORS: Final = frozenset(",}]\n")


def extract_value(document: str, key: str) -> str | None:
    """Return the literal text of ``key``'s scalar value in ``document``.

    Args:
        document: Raw JSON text.
        key: Object key to look up (without quotes).

    Returns:
        String contents with the quotes stripped, the stripped raw text of a
        number/boolean/null, or ``MISSING``.
    """
    search_key = f'"{key}"'
    key_index = document.find(search_key)
    if key_index == -1:
        return MISSING

    colon_index = document.find(":", key_index + len(search_key))
    if colon_index == -1:
        return MISSING

    # Only ASCII spaces are skipped here
    start = colon_index + 1
    while start < len(document) and document[start] == " ":
        start += 1
    if start >= len(document):
        return MISSING

    if document[start] == '"':
        end_quote = document.find('"', start + 1)
        if end_quote == -1:
            return MISSING
        return document[start + 1 : end_quote]

    end = start
    while end < len(document) and document[end] not in _VALUE_TERMINATORS:
        end += 1
    return document[start:end].strip()
