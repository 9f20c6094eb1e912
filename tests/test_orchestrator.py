"""Tests for verse/word translation orchestration."""

import httpx
import pytest

from palabra.engine.cache import TTLCache
from palabra.engine.resolver import WordResolver
from palabra.lexicon.dictionary import BilingualDictionary
from palabra.pipeline.orchestrator import (
    TranslationService,
    TranslationSource,
    VerseTranslation,
)
from palabra.sources.bible_api import EnglishVerse, EnglishVerseClient, VerseFetchError
from palabra.sources.books import english_book_name

GENESIS_ES = "En el principio creó Dios los cielos y la tierra"
GENESIS_EN = "In the beginning God created the heaven and the earth."


class FakeVerseClient:
    """Answers from a fixed table; raises VerseFetchError otherwise."""

    def __init__(self, verses=None, error=None):
        self.verses = verses or {}
        self.error = error
        self.calls = []
        self.closed = False

    async def fetch_verse(self, spanish_book, chapter, verse):
        self.calls.append((spanish_book, chapter, verse))
        english_book = english_book_name(spanish_book)
        if self.error is not None:
            raise self.error
        text = self.verses.get((english_book, chapter, verse))
        if text is None:
            raise VerseFetchError("not found", status_code=404)
        return EnglishVerse(
            reference=f"{english_book} {chapter}:{verse}",
            text=text,
            translation="King James Version",
            book=english_book,
            chapter=chapter,
            verse=verse,
        )

    async def aclose(self):
        self.closed = True


class ExplodingResolver:
    async def resolve(self, raw_word, context=None):
        if raw_word == "boom":
            raise RuntimeError("boom")
        return raw_word.upper()


@pytest.fixture
def dictionary():
    return BilingualDictionary.curated()


def make_service(dictionary, verse_client=None, resolver=None):
    cache = TTLCache()
    return TranslationService(
        dictionary=dictionary,
        verse_client=verse_client or FakeVerseClient({("Genesis", 1, 1): GENESIS_EN}),
        resolver=resolver or WordResolver(dictionary, cache=cache),
        cache=cache,
    )


class TestTranslateVerse:
    @pytest.mark.asyncio
    async def test_bible_api_source(self, dictionary):
        service = make_service(dictionary)
        result = await service.translate_verse("Génesis", 1, 1, GENESIS_ES)

        assert result.source is TranslationSource.BIBLE_API
        assert result.translated_text == GENESIS_EN
        assert result.original_text == GENESIS_ES
        assert result.from_language == "es"
        assert result.to_language == "en"

    @pytest.mark.asyncio
    async def test_dictionary_fallback_on_fetch_error(self, dictionary):
        verse_client = FakeVerseClient(error=VerseFetchError("timeout"))
        service = make_service(dictionary, verse_client=verse_client)

        result = await service.translate_verse("Génesis", 1, 1, "la tierra")

        assert result.source is TranslationSource.DICTIONARY
        assert result.translated_text == "the earth"

    @pytest.mark.asyncio
    async def test_dictionary_fallback_on_malformed_payload(self, dictionary):
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, json={"text": ["x"]})
        )
        verse_client = EnglishVerseClient(client=httpx.AsyncClient(transport=transport))
        service = make_service(dictionary, verse_client=verse_client)

        result = await service.translate_verse("Génesis", 1, 1, "Dios")

        assert result.source is TranslationSource.DICTIONARY
        assert result.translated_text == "God"

    @pytest.mark.asyncio
    async def test_dictionary_fallback_on_unknown_book(self, dictionary):
        service = make_service(dictionary)
        result = await service.translate_verse("Enoc", 1, 1, "Dios")
        assert result.source is TranslationSource.DICTIONARY
        assert result.translated_text == "God"

    @pytest.mark.asyncio
    async def test_unknown_words_kept(self, dictionary):
        verse_client = FakeVerseClient(error=VerseFetchError("down"))
        service = make_service(dictionary, verse_client=verse_client)
        result = await service.translate_verse("Génesis", 1, 1, "Zorobabel y Dios")
        assert result.translated_text == "Zorobabel and God"

    @pytest.mark.asyncio
    async def test_bible_api_result_cached(self, dictionary):
        verse_client = FakeVerseClient({("Genesis", 1, 1): GENESIS_EN})
        service = make_service(dictionary, verse_client=verse_client)

        first = await service.translate_verse("Génesis", 1, 1, GENESIS_ES)
        second = await service.translate_verse("Génesis", 1, 1, GENESIS_ES)

        assert second is first
        assert len(verse_client.calls) == 1

    @pytest.mark.asyncio
    async def test_dictionary_result_not_cached(self, dictionary):
        verse_client = FakeVerseClient(error=VerseFetchError("down"))
        service = make_service(dictionary, verse_client=verse_client)

        await service.translate_verse("Génesis", 1, 1, "tierra")
        verse_client.error = None
        verse_client.verses[("Genesis", 1, 1)] = GENESIS_EN
        result = await service.translate_verse("Génesis", 1, 1, "tierra")

        assert result.source is TranslationSource.BIBLE_API

    def test_to_dict(self):
        translation = VerseTranslation(
            original_text="Dios",
            translated_text="God",
            source=TranslationSource.DICTIONARY,
            timestamp="2024-01-01T00:00:00+00:00",
        )
        assert translation.to_dict() == {
            "original_text": "Dios",
            "translated_text": "God",
            "from_language": "es",
            "to_language": "en",
            "timestamp": "2024-01-01T00:00:00+00:00",
            "source": "dictionary",
        }


class TestFetchEnglishVerse:
    @pytest.mark.asyncio
    async def test_errors_propagate(self, dictionary):
        service = make_service(dictionary, verse_client=FakeVerseClient())
        with pytest.raises(VerseFetchError):
            await service.fetch_english_verse("Juan", 3, 16)

    @pytest.mark.asyncio
    async def test_cached(self, dictionary):
        verse_client = FakeVerseClient({("Genesis", 1, 1): GENESIS_EN})
        service = make_service(dictionary, verse_client=verse_client)
        await service.fetch_english_verse("Génesis", 1, 1)
        await service.fetch_english_verse("Génesis", 1, 1)
        assert len(verse_client.calls) == 1


class TestWords:
    @pytest.mark.asyncio
    async def test_translate_word_with_context(self, dictionary):
        service = make_service(dictionary)
        assert await service.translate_word("el", "he that believeth") == "he"
        assert await service.translate_word("el") == "the"

    @pytest.mark.asyncio
    async def test_prewarm_dedups(self, dictionary):
        service = make_service(dictionary)
        result = await service.prewarm(["Dios", "tierra", "Dios"])
        assert result == {"Dios": "God", "tierra": "earth"}

    @pytest.mark.asyncio
    async def test_prewarm_skips_failures(self, dictionary):
        service = make_service(dictionary, resolver=ExplodingResolver())
        result = await service.prewarm(["uno", "boom", "dos"])
        assert result == {"uno": "UNO", "dos": "DOS"}


class TestAlignment:
    def test_align_verse(self, dictionary):
        service = make_service(dictionary)
        alignment = service.align_verse(GENESIS_ES, GENESIS_EN)
        assert alignment[4] == {3}
        assert alignment[9] == {9}

    def test_explain_alignment(self, dictionary):
        service = make_service(dictionary)
        links = service.explain_alignment("Dios", "God")
        assert [link.english_words for link in links] == [["God"]]


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_injected_clients_not_closed(self, dictionary):
        verse_client = FakeVerseClient()
        async with make_service(dictionary, verse_client=verse_client):
            pass
        assert verse_client.closed is False
