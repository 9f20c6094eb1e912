"""Single-word es->en translation through the MyMemory API.

Used only as the word resolver's fallback for words missing from the
curated dictionary. Free tier, no key required for moderate usage.
"""

from __future__ import annotations

import logging

import httpx

from palabra.config import Settings

logger = logging.getLogger(__name__)


class TranslationFetchError(Exception):
    """Raised when the translation service fails or answers garbage."""


class MyMemoryClient:
    """Translates single words; callable as a WordFallback."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.settings = settings or Settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=self.settings.request_timeout,
            headers={"User-Agent": self.settings.user_agent},
        )

    @property
    def langpair(self) -> str:
        return f"{self.settings.source_language}|{self.settings.target_language}"

    async def translate(self, word: str) -> str | None:
        """Translate one word.

        Returns:
            The translation, or None when the service has none

        Raises:
            TranslationFetchError: On transport errors, non-2xx responses,
                an error responseStatus in the body, or malformed JSON
        """
        try:
            response = await self._client.get(
                self.settings.translate_api_url,
                params={"q": word, "langpair": self.langpair},
            )
        except httpx.HTTPError as e:
            raise TranslationFetchError(f"MyMemory request failed: {e}") from e

        if response.status_code != 200:
            raise TranslationFetchError(f"MyMemory API error: {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise TranslationFetchError("MyMemory returned invalid JSON") from e

        if isinstance(data, dict):
            # Quota and other errors come back as HTTP 200 with a warning text
            status = data.get("responseStatus")
            if status is not None and str(status) != "200":
                raise TranslationFetchError(f"MyMemory API error: {status}")

        response_data = data.get("responseData") if isinstance(data, dict) else None
        translation = (
            response_data.get("translatedText") if isinstance(response_data, dict) else None
        )
        if not isinstance(translation, str) or not translation.strip():
            logger.debug(f"No MyMemory translation for {word!r}")
            return None
        return translation.strip()

    async def __call__(self, word: str) -> str | None:
        return await self.translate(word)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
