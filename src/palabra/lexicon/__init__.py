"""Bilingual lexicon: word normalization and the Spanish-English dictionary."""

from palabra.lexicon.dictionary import (
    BilingualDictionary,
    Candidates,
    get_default_dictionary,
)
from palabra.lexicon.normalize import (
    clean_word,
    normalize_text,
    normalize_word,
    tokenize,
)

__all__ = [
    "BilingualDictionary",
    "Candidates",
    "clean_word",
    "get_default_dictionary",
    "normalize_text",
    "normalize_word",
    "tokenize",
]
