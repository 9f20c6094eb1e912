"""Tests for the bible-api.com English verse client."""

import httpx
import pytest

from palabra.config import Settings
from palabra.sources.bible_api import EnglishVerseClient, VerseFetchError
from palabra.sources.books import UnknownBookError

GENESIS_PAYLOAD = {
    "reference": "Genesis 1:1",
    "text": "In the beginning God created the heaven and the earth.\n",
    "translation_name": "King James Version",
}


def make_client(handler, settings=None):
    transport = httpx.MockTransport(handler)
    return EnglishVerseClient(
        settings, client=httpx.AsyncClient(transport=transport)
    )


class TestBuildUrl:
    def test_url_shape(self):
        client = EnglishVerseClient(client=httpx.AsyncClient())
        url = client.build_url("1 John", 4, 8)
        assert url == "https://bible-api.com/1%20John%204%3A8?translation=kjv"

    def test_custom_base_and_translation(self):
        settings = Settings(bible_api_url="http://localhost:9/", english_translation="web")
        client = EnglishVerseClient(settings, client=httpx.AsyncClient())
        assert client.build_url("Genesis", 1, 1).startswith("http://localhost:9/Genesis")
        assert client.build_url("Genesis", 1, 1).endswith("?translation=web")


class TestFetchVerse:
    @pytest.mark.asyncio
    async def test_success(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=GENESIS_PAYLOAD)

        client = make_client(handler)
        verse = await client.fetch_verse("Génesis", 1, 1)

        assert verse.text == "In the beginning God created the heaven and the earth."
        assert verse.translation == "King James Version"
        assert verse.book == "Genesis"
        assert verse.reference == "Genesis 1:1"
        assert seen[0].url.path == "/Genesis 1:1"
        assert seen[0].url.params["translation"] == "kjv"

    @pytest.mark.asyncio
    async def test_whitespace_collapsed(self):
        def handler(request):
            return httpx.Response(200, json={"text": "  For God\nso  loved\n"})

        verse = await make_client(handler).fetch_verse("Juan", 3, 16)
        assert verse.text == "For God so loved"
        assert verse.translation == "KJV"
        assert verse.reference == "John 3:16"

    @pytest.mark.asyncio
    async def test_unknown_book_raises_before_request(self):
        def handler(request):
            raise AssertionError("no request expected")

        with pytest.raises(UnknownBookError):
            await make_client(handler).fetch_verse("Enoc", 1, 1)

    @pytest.mark.asyncio
    async def test_http_error_status(self):
        def handler(request):
            return httpx.Response(404, json={"error": "not found"})

        with pytest.raises(VerseFetchError) as exc_info:
            await make_client(handler).fetch_verse("Génesis", 1, 1)
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(VerseFetchError, match="timed out"):
            await make_client(handler).fetch_verse("Génesis", 1, 1)

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(VerseFetchError):
            await make_client(handler).fetch_verse("Génesis", 1, 1)

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        def handler(request):
            return httpx.Response(200, content=b"<html>")

        with pytest.raises(VerseFetchError, match="invalid JSON"):
            await make_client(handler).fetch_verse("Génesis", 1, 1)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [[], {"text": ""}, {"text": None}, {}, {"text": ["x"]}, {"text": 42}],
    )
    async def test_missing_text(self, payload):
        def handler(request):
            return httpx.Response(200, json=payload)

        with pytest.raises(VerseFetchError):
            await make_client(handler).fetch_verse("Génesis", 1, 1)

    @pytest.mark.asyncio
    async def test_injected_client_not_closed(self):
        http = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        client = EnglishVerseClient(client=http)
        await client.aclose()
        assert not http.is_closed
        await http.aclose()


class TestMalformedText:
    @pytest.mark.asyncio
    async def test_non_string_text_is_fetch_error(self):
        def handler(request):
            return httpx.Response(200, json={"text": ["x"]})

        with pytest.raises(VerseFetchError, match="unexpected payload"):
            await make_client(handler).fetch_verse("Génesis", 1, 1)
