"""Single-word Spanish -> English resolution with contextual disambiguation.

Resolution order:
1. Curated dictionary (normalized key, then raw lowercase phrase key)
2. External single-word translation fallback (async, optional)
3. The original word, unchanged

When a word has several candidate senses, the English verse it appears
in decides between them: the first candidate found in the context as a
whole word wins, then a relaxed match that drops one trailing "e" from
the candidate ("create" against "created"), then the first candidate.
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Awaitable, Callable, Iterable, Sequence

from palabra.config import Settings
from palabra.engine.cache import TTLCache
from palabra.lexicon.dictionary import BilingualDictionary, get_default_dictionary
from palabra.lexicon.normalize import clean_word, normalize_word

logger = logging.getLogger(__name__)

# async (word) -> translation or None
WordFallback = Callable[[str], Awaitable[str | None]]


def choose_candidate(candidates: Sequence[str], context: str | None = None) -> str:
    """Pick one sense from an ordered, non-empty candidate list.

    Args:
        candidates: Candidate English translations, default sense first
        context: English sentence the word was translated into

    Returns:
        The chosen candidate
    """
    if len(candidates) == 1 or not context:
        return candidates[0]

    lowered = context.lower()

    for candidate in candidates:
        pattern = r"\b" + re.escape(candidate.lower()) + r"\b"
        if re.search(pattern, lowered):
            return candidate

    # Crude English inflection bridge: "create" also matches "created"
    for candidate in candidates:
        stem = candidate.lower()
        if stem.endswith("e"):
            stem = stem[:-1]
        if stem and stem in lowered:
            return candidate

    return candidates[0]


def _is_numeric(word: str) -> bool:
    # Verse numbers arrive with punctuation attached ("12,", "3:16")
    return clean_word(word).isdigit()


class WordResolver:
    """Resolves a Spanish word to one English translation.

    Never raises for unknown words or fallback failures; the original
    word is returned instead.
    """

    def __init__(
        self,
        dictionary: BilingualDictionary | None = None,
        fallback: WordFallback | None = None,
        cache: TTLCache | None = None,
        settings: Settings | None = None,
    ):
        self.dictionary = (
            dictionary if dictionary is not None else get_default_dictionary()
        )
        self.fallback = fallback
        self.cache = cache if cache is not None else TTLCache()
        self.settings = settings or Settings()

    def _cache_key(self, raw_word: str) -> str:
        s = self.settings
        return f"word-translation-{raw_word}-{s.source_language}-{s.target_language}"

    def resolve_offline(self, raw_word: str, context: str | None = None) -> str:
        """Dictionary-only resolution: no fallback, no cache, no I/O."""
        candidates = self.dictionary.candidates(raw_word)
        if not candidates:
            return raw_word
        return choose_candidate(candidates, context)

    async def resolve(self, raw_word: str, context: str | None = None) -> str:
        """Resolve a word, consulting the external fallback when needed.

        Args:
            raw_word: Token as displayed (punctuation allowed)
            context: English verse text used to pick between senses.
                Context-dependent results are never cached.

        Returns:
            English translation, or raw_word if none is known
        """
        if not context:
            cached = self.cache.get(self._cache_key(raw_word))
            if cached is not None:
                return cached

        result = await self._resolve(raw_word, context)

        if not context:
            self.cache.set(
                self._cache_key(raw_word), result, self.settings.word_cache_ttl
            )
        return result

    async def _resolve(self, raw_word: str, context: str | None) -> str:
        key = normalize_word(raw_word)
        if not key:
            return raw_word

        candidates = self.dictionary.candidates(raw_word)

        if not candidates and self._should_use_fallback(raw_word):
            translation = await self._fetch_fallback(raw_word)
            if translation:
                self.dictionary.add_if_absent(key, translation)
                candidates = self.dictionary.lookup(key) or (translation,)

        if not candidates:
            return raw_word

        return choose_candidate(candidates, context)

    def _should_use_fallback(self, raw_word: str) -> bool:
        return (
            self.fallback is not None
            and len(raw_word) >= self.settings.min_fallback_length
            and not _is_numeric(raw_word)
        )

    async def _fetch_fallback(self, raw_word: str) -> str | None:
        query = clean_word(raw_word) or raw_word
        try:
            translation = await self.fallback(query)
        except Exception as e:
            logger.warning(f"Word translation fallback failed for {query!r}: {e}")
            return None
        if not isinstance(translation, str) or not translation.strip():
            return None
        return translation.strip()

    async def resolve_many(
        self, words: Iterable[str], context: str | None = None
    ) -> list[str]:
        """Resolve several words concurrently, preserving order."""
        return list(await asyncio.gather(*(self.resolve(w, context) for w in words)))
