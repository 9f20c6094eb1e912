"""Bilingual Spanish-English dictionary with ordered candidate senses."""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Iterator, Mapping

from palabra.lexicon.entries import CURATED_SECTIONS
from palabra.lexicon.normalize import normalize_word

logger = logging.getLogger(__name__)

Candidates = tuple[str, ...]


def _as_candidates(key: str, value: str | Iterable[str]) -> Candidates:
    if isinstance(value, str):
        candidates: Candidates = (value,)
    else:
        candidates = tuple(value)
    if not candidates or any(not c for c in candidates):
        raise ValueError(f"Empty candidate for dictionary key {key!r}")
    return candidates


def _canonical_key(key: str) -> str:
    """Phrase keys are lowercased only; single words are fully normalized."""
    if " " in key.strip():
        return key.strip().lower()
    return normalize_word(key)


class BilingualDictionary:
    """Spanish word -> ordered English candidates.

    Candidate order is part of the contract: the first candidate is the
    default sense used when no context picks another one.

    The table is immutable apart from add_if_absent(), which the word
    resolver uses to remember translations obtained from the external
    fallback. Inserts never replace an existing entry and are atomic
    under concurrent writers.
    """

    def __init__(self, entries: Mapping[str, str | Iterable[str]] | None = None):
        """Build the dictionary from a literal table.

        Args:
            entries: key -> gloss or list of glosses

        Raises:
            ValueError: If a key is empty, a candidate list is empty,
                or two keys collapse onto the same normalized key
        """
        self._entries: dict[str, Candidates] = {}
        self._lock = threading.Lock()

        for key, value in (entries or {}).items():
            canonical = _canonical_key(key)
            if not canonical:
                raise ValueError(f"Dictionary key {key!r} normalizes to nothing")
            if canonical in self._entries:
                raise ValueError(
                    f"Duplicate dictionary key {key!r} (normalized: {canonical!r})"
                )
            self._entries[canonical] = _as_candidates(key, value)

    @classmethod
    def curated(cls) -> "BilingualDictionary":
        """Build the dictionary from the curated word table."""
        merged: dict[str, str | list[str]] = {}
        for section in CURATED_SECTIONS:
            for key, value in section.items():
                if key in merged:
                    raise ValueError(f"Key {key!r} appears in two curated sections")
                merged[key] = value
        return cls(merged)

    def lookup(self, key: str) -> Candidates | None:
        """Exact lookup of an already-normalized key (or phrase key)."""
        return self._entries.get(key)

    def candidates(self, raw_word: str) -> Candidates | None:
        """Candidates for a raw token.

        Tries the normalized form first, then the raw lowercased form so
        that phrase keys ("sin embargo", "por qué") can still match.
        """
        key = normalize_word(raw_word)
        if key:
            found = self._entries.get(key)
            if found is not None:
                return found
        return self._entries.get(raw_word.lower())

    def add_if_absent(self, key: str, translation: str) -> bool:
        """Insert a single-candidate entry unless the key already exists.

        Args:
            key: Normalized key
            translation: English translation

        Returns:
            True if inserted, False if an entry was already present
        """
        if not key or not translation:
            return False
        with self._lock:
            if key in self._entries:
                return False
            self._entries[key] = (translation,)
        logger.debug(f"Learned dictionary entry: {key} -> {translation}")
        return True

    def keys(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))


_default_dictionary: BilingualDictionary | None = None
_default_lock = threading.Lock()


def get_default_dictionary() -> BilingualDictionary:
    """Shared curated dictionary, built on first use."""
    global _default_dictionary
    if _default_dictionary is None:
        with _default_lock:
            if _default_dictionary is None:
                _default_dictionary = BilingualDictionary.curated()
    return _default_dictionary
