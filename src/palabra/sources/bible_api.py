"""English (KJV) verse client for bible-api.com.

bible-api.com is free and needs no API key. Request format:

    GET https://bible-api.com/Genesis%201%3A1?translation=kjv

Response (abridged):

    {"reference": "Genesis 1:1", "text": "In the beginning ...\\n",
     "translation_name": "King James Version", "verses": [...]}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import quote

import httpx

from palabra.config import Settings
from palabra.sources.books import english_book_name

logger = logging.getLogger(__name__)


class VerseFetchError(Exception):
    """Raised when the English verse cannot be retrieved."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


@dataclass
class EnglishVerse:
    """An English verse matching a Spanish reference."""

    reference: str
    text: str
    translation: str
    book: str
    chapter: int
    verse: int

    def to_dict(self) -> dict:
        return {
            "reference": self.reference,
            "text": self.text,
            "translation": self.translation,
            "book": self.book,
            "chapter": self.chapter,
            "verse": self.verse,
        }


class EnglishVerseClient:
    """Fetches English verses for Spanish references."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.settings = settings or Settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=self.settings.request_timeout,
            headers={
                "Accept": "application/json",
                "User-Agent": self.settings.user_agent,
            },
        )

    def build_url(self, english_book: str, chapter: int, verse: int) -> str:
        passage = quote(f"{english_book} {chapter}:{verse}")
        base = self.settings.bible_api_url.rstrip("/")
        return f"{base}/{passage}?translation={self.settings.english_translation}"

    async def fetch_verse(self, spanish_book: str, chapter: int, verse: int) -> EnglishVerse:
        """Fetch the English verse for a Spanish book/chapter/verse.

        Raises:
            UnknownBookError: If the Spanish book name is not recognized
            VerseFetchError: On transport errors, non-2xx responses or
                malformed payloads
        """
        english_book = english_book_name(spanish_book)
        url = self.build_url(english_book, chapter, verse)
        logger.info(f"Fetching English verse: {english_book} {chapter}:{verse}")

        try:
            response = await self._client.get(url)
        except httpx.TimeoutException as e:
            raise VerseFetchError(
                f"English Bible API timed out for {english_book} {chapter}:{verse}"
            ) from e
        except httpx.HTTPError as e:
            raise VerseFetchError(f"Unable to reach English Bible API: {e}") from e

        if response.status_code != 200:
            raise VerseFetchError(
                f"English Bible API error: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise VerseFetchError("English Bible API returned invalid JSON") from e

        if not isinstance(data, dict):
            raise VerseFetchError("English Bible API returned unexpected payload")

        text = data.get("text") or ""
        if not isinstance(text, str):
            raise VerseFetchError("English Bible API returned unexpected payload")
        text = text.strip()
        if not text:
            raise VerseFetchError(
                f"No English text for {english_book} {chapter}:{verse}"
            )

        return EnglishVerse(
            reference=data.get("reference") or f"{english_book} {chapter}:{verse}",
            text=" ".join(text.split()),
            translation=data.get("translation_name") or "KJV",
            book=english_book,
            chapter=chapter,
            verse=verse,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
