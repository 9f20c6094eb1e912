"""Verse and word translation orchestration.

Sits between the translation engine and the network/UI layers:

- translate_verse(): English KJV text for a Spanish verse, falling back
  to a word-by-word dictionary rendering when the verse fetch fails.
  Every result is tagged with its provenance (bible-api / dictionary).
- translate_word(): single-word resolution, optionally disambiguated by
  the English verse.
- align_verse(): Spanish -> English word alignment for hover links.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable

from palabra.config import Settings
from palabra.engine.alignment import AlignmentEngine, AlignmentLink, AlignmentMap
from palabra.engine.cache import TTLCache
from palabra.engine.resolver import WordResolver
from palabra.lexicon.dictionary import BilingualDictionary, get_default_dictionary
from palabra.lexicon.normalize import tokenize
from palabra.sources.bible_api import EnglishVerse, EnglishVerseClient, VerseFetchError
from palabra.sources.books import UnknownBookError
from palabra.sources.mymemory import MyMemoryClient

logger = logging.getLogger(__name__)


class TranslationSource(str, Enum):
    """Where a verse translation came from."""

    BIBLE_API = "bible-api"
    DICTIONARY = "dictionary"


@dataclass
class VerseTranslation:
    """A Spanish verse with its English rendering."""

    original_text: str
    translated_text: str
    source: TranslationSource
    from_language: str = "es"
    to_language: str = "en"
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def to_dict(self) -> dict:
        return {
            "original_text": self.original_text,
            "translated_text": self.translated_text,
            "from_language": self.from_language,
            "to_language": self.to_language,
            "timestamp": self.timestamp,
            "source": self.source.value,
        }


class TranslationService:
    """Coordinates verse fetching, word resolution and alignment.

    Owns the HTTP clients it creates; use as an async context manager or
    call close() when done.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        dictionary: BilingualDictionary | None = None,
        verse_client: EnglishVerseClient | None = None,
        resolver: WordResolver | None = None,
        cache: TTLCache | None = None,
    ):
        self.settings = settings or Settings()
        self.dictionary = (
            dictionary if dictionary is not None else get_default_dictionary()
        )
        self.cache = cache if cache is not None else TTLCache()
        self._owned: list = []

        if verse_client is None:
            verse_client = EnglishVerseClient(self.settings)
            self._owned.append(verse_client)
        self.verse_client = verse_client

        if resolver is None:
            fallback = MyMemoryClient(self.settings)
            self._owned.append(fallback)
            resolver = WordResolver(
                self.dictionary, fallback, cache=self.cache, settings=self.settings
            )
        self.resolver = resolver
        self.aligner = AlignmentEngine(
            self.dictionary, tie_epsilon=self.settings.alignment_tie_epsilon
        )

    async def fetch_english_verse(
        self, spanish_book: str, chapter: int, verse: int
    ) -> EnglishVerse:
        """Fetch (and cache) the English verse for a Spanish reference."""
        cache_key = f"english-verse-{spanish_book}-{chapter}-{verse}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        result = await self.verse_client.fetch_verse(spanish_book, chapter, verse)
        self.cache.set(cache_key, result, self.settings.verse_cache_ttl)
        return result

    async def translate_verse(
        self, spanish_book: str, chapter: int, verse: int, spanish_text: str
    ) -> VerseTranslation:
        """English rendering of a Spanish verse, tagged with provenance.

        The KJV verse is preferred; any failure to obtain it (unknown
        book, network error, bad response) degrades to a word-by-word
        dictionary rendering instead of raising.
        """
        cache_key = f"verse-translation-{spanish_book}-{chapter}-{verse}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        try:
            english = await self.fetch_english_verse(spanish_book, chapter, verse)
        except (VerseFetchError, UnknownBookError) as e:
            logger.warning(
                f"English verse unavailable for {spanish_book} {chapter}:{verse}, "
                f"using dictionary: {e}"
            )
            return await self.translate_text_with_dictionary(spanish_text)

        result = VerseTranslation(
            original_text=spanish_text,
            translated_text=english.text,
            source=TranslationSource.BIBLE_API,
            from_language=self.settings.source_language,
            to_language=self.settings.target_language,
        )
        self.cache.set(cache_key, result, self.settings.verse_cache_ttl)
        return result

    async def translate_text_with_dictionary(self, text: str) -> VerseTranslation:
        """Word-by-word rendering: each token resolved without context."""
        words = tokenize(text)
        translated = await self.resolver.resolve_many(words)
        return VerseTranslation(
            original_text=text,
            translated_text=" ".join(translated),
            source=TranslationSource.DICTIONARY,
            from_language=self.settings.source_language,
            to_language=self.settings.target_language,
        )

    async def translate_word(self, raw_word: str, context: str | None = None) -> str:
        """Translate one word; context is the English verse text."""
        return await self.resolver.resolve(raw_word, context)

    async def prewarm(
        self, words: Iterable[str], context: str | None = None
    ) -> dict[str, str]:
        """Resolve many words concurrently (e.g. a whole visible chapter)."""
        unique = list(dict.fromkeys(words))
        results = await asyncio.gather(
            *(self.resolver.resolve(w, context) for w in unique),
            return_exceptions=True,
        )
        resolved = {}
        for word, result in zip(unique, results):
            if isinstance(result, Exception):
                logger.warning(f"Prewarm failed for {word!r}: {result}")
                continue
            resolved[word] = result
        return resolved

    def align_verse(self, spanish_text: str, english_text: str) -> AlignmentMap:
        return self.aligner.align(spanish_text, english_text)

    def explain_alignment(
        self, spanish_text: str, english_text: str
    ) -> list[AlignmentLink]:
        return self.aligner.explain(spanish_text, english_text)

    async def close(self) -> None:
        for owned in self._owned:
            await owned.aclose()
        self._owned.clear()

    async def __aenter__(self) -> "TranslationService":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
