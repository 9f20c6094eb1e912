"""Word normalization for dictionary lookup and cross-language matching."""

from __future__ import annotations

import re
import unicodedata

# Combining diacritical marks block
_COMBINING_MARKS = re.compile("[\u0300-\u036f]")

# Punctuation removed from tokens before lookup
PUNCTUATION = ".,/#!$%^&*;:{}=-_`~()¿¡\"'«»?“”‘’"
_PUNCTUATION_RE = re.compile("[" + re.escape(PUNCTUATION) + "]")


def _strip_marks(text: str) -> str:
    return _COMBINING_MARKS.sub("", unicodedata.normalize("NFD", text))


def normalize_word(raw: str) -> str:
    """Normalize a single token for dictionary lookup.

    Normalization steps:
    1. Unicode NFD decomposition
    2. Remove combining diacritical marks (U+0300-U+036F)
    3. Lowercase
    4. Remove punctuation

    Lowercasing can introduce a combining mark of its own (``İ`` becomes
    ``i`` + U+0307), so marks are stripped again afterwards.

    Args:
        raw: Token as it appears in the text, punctuation included

    Returns:
        Normalized token (possibly empty)

    Examples:
        >>> normalize_word("¿Dios?")
        'dios'
        >>> normalize_word("creó,")
        'creo'
        >>> normalize_word("Niño")
        'nino'
    """
    lowered = _strip_marks(raw).lower()
    return _PUNCTUATION_RE.sub("", _strip_marks(lowered))


def clean_word(raw: str) -> str:
    """Remove punctuation only, keeping case and accents."""
    return _PUNCTUATION_RE.sub("", raw).strip()


def normalize_text(text: str) -> str:
    """Normalize a phrase: strip accents, lowercase and trim.

    Unlike normalize_word, punctuation and inner whitespace are kept,
    so "1 Crónicas" becomes "1 cronicas".
    """
    return _strip_marks(text).lower().strip()


def tokenize(text: str) -> list[str]:
    """Split a sentence into raw tokens on single spaces.

    Leading/trailing whitespace is trimmed first. Punctuation stays
    attached to its token.
    """
    stripped = text.strip()
    if not stripped:
        return []
    return stripped.split(" ")
