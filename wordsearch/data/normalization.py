"""Shared helpers for word normalization."""

from __future__ import annotations

import re
import unicodedata

# Letters that do not decompose under NFKD.
LIGATURES = {
    "Œ": "OE",
    "œ": "OE",
    "Æ": "AE",
    "æ": "AE",
    "ß": "SS",
}

WORD_RE = re.compile(r"[^A-Za-z]")


def normalize_word(text: str) -> str:
    """Return ``text`` stripped and uppercased, as placed in the grid."""

    if not text:
        return ""
    return text.strip().upper()


def is_letter_word(text: str) -> bool:
    """True when ``text`` is non-empty and every character is an uppercase letter."""

    return bool(text) and all(char.isalpha() and char.isupper() for char in text)


def clean_word(text: str) -> str:
    """Return an uppercase A-Z representation of ``text``.

    Accents are folded (``prière`` -> ``PRIERE``) and anything that is not a
    letter is dropped, so loaded words share the filler alphabet.
    """

    if not text:
        return ""
    transformed = []
    for char in text:
        if char in LIGATURES:
            transformed.append(LIGATURES[char])
            continue
        decomposed = unicodedata.normalize("NFKD", char)
        transformed.append("".join(c for c in decomposed if not unicodedata.combining(c)))
    ascii_word = WORD_RE.sub("", "".join(transformed))
    return ascii_word.upper()


__all__ = ["clean_word", "is_letter_word", "normalize_word", "LIGATURES"]
