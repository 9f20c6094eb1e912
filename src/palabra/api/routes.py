"""API route definitions."""

from __future__ import annotations

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from palabra import __version__
from palabra.api.models import (
    AlignRequest,
    AlignResponse,
    AlignmentLinkModel,
    BookModel,
    EnglishVerseModel,
    HealthModel,
    VerseTranslationModel,
    WordTranslationModel,
)
from palabra.config import Settings
from palabra.lexicon.normalize import clean_word, tokenize
from palabra.pipeline.orchestrator import TranslationService
from palabra.sources.bible_api import VerseFetchError
from palabra.sources.books import BOOKS, UnknownBookError

router = APIRouter()

_service: TranslationService | None = None


def get_service() -> TranslationService:
    """Process-wide translation service (overridable in tests)."""
    global _service
    if _service is None:
        _service = TranslationService(Settings.from_env())
    return _service


async def close_service() -> None:
    global _service
    if _service is not None:
        await _service.close()
        _service = None


@router.get("/health", response_model=HealthModel)
async def health_check(service: TranslationService = Depends(get_service)):
    """Health check endpoint."""
    return HealthModel(
        status="ok",
        version=__version__,
        dictionary_entries=len(service.dictionary),
    )


@router.get("/books", response_model=List[BookModel])
async def list_books():
    """List the books of the Reina-Valera Bible in canonical order."""
    return [
        BookModel(spanish=b.spanish, english=b.english, chapters=b.chapters)
        for b in BOOKS
    ]


@router.get("/translate/word", response_model=WordTranslationModel)
async def translate_word(
    word: Annotated[str, Query(min_length=1, description="Spanish word")],
    context: Annotated[
        Optional[str],
        Query(description="English verse text used to pick the right sense"),
    ] = None,
    service: TranslationService = Depends(get_service),
):
    """
    Translate a single Spanish word for a tooltip.

    `translated` is false when the result is the word itself, so the
    client can show "no translation" instead of a redundant arrow.
    """
    translation = await service.translate_word(word, context)
    return WordTranslationModel(
        word=word,
        translation=translation,
        translated=clean_word(translation).lower() != clean_word(word).lower(),
        context_used=bool(context),
    )


@router.get("/translate/verse", response_model=VerseTranslationModel)
async def translate_verse(
    book: Annotated[str, Query(description="Spanish book name, e.g. 'Génesis'")],
    chapter: Annotated[int, Query(ge=1)],
    verse: Annotated[int, Query(ge=1)],
    text: Annotated[str, Query(description="Spanish verse text")],
    service: TranslationService = Depends(get_service),
):
    """Translate a verse: KJV text when available, dictionary otherwise."""
    result = await service.translate_verse(book, chapter, verse, text)
    return VerseTranslationModel(**result.to_dict())


@router.get("/bible/english", response_model=EnglishVerseModel)
async def english_verse(
    book: Annotated[str, Query(description="Spanish book name")],
    chapter: Annotated[int, Query(ge=1)],
    verse: Annotated[int, Query(ge=1)],
    service: TranslationService = Depends(get_service),
):
    """Fetch the English (KJV) verse matching a Spanish reference."""
    try:
        result = await service.fetch_english_verse(book, chapter, verse)
    except UnknownBookError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except VerseFetchError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return EnglishVerseModel(**result.to_dict())


@router.post("/align", response_model=AlignResponse)
async def align(
    request: AlignRequest, service: TranslationService = Depends(get_service)
):
    """Align the words of a Spanish verse with its English counterpart."""
    links = service.explain_alignment(request.spanish, request.english)
    return AlignResponse(
        spanish_words=tokenize(request.spanish),
        english_words=tokenize(request.english),
        alignment={link.spanish_index: link.english_indices for link in links},
        links=[AlignmentLinkModel(**link.to_dict()) for link in links],
    )
