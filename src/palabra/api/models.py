"""Pydantic models for API."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class HealthModel(BaseModel):
    """Health check response."""

    status: str
    version: str
    dictionary_entries: int


class BookModel(BaseModel):
    """A book of the Bible."""

    spanish: str = Field(..., description="Reina-Valera book name")
    english: str = Field(..., description="KJV book name")
    chapters: int


class WordTranslationModel(BaseModel):
    """Single-word translation."""

    word: str = Field(..., description="Word as requested")
    translation: str = Field(..., description="English translation")
    translated: bool = Field(
        ..., description="False when no distinct translation was found"
    )
    context_used: bool = Field(
        False, description="Whether an English verse disambiguated the sense"
    )


class VerseTranslationModel(BaseModel):
    """Spanish verse with its English rendering."""

    original_text: str
    translated_text: str
    from_language: str
    to_language: str
    timestamp: str
    source: str = Field(..., description="bible-api or dictionary")


class EnglishVerseModel(BaseModel):
    """English verse for a Spanish reference."""

    reference: str
    text: str
    translation: str
    book: str
    chapter: int
    verse: int


class AlignRequest(BaseModel):
    """Verse pair to align."""

    spanish: str = Field(..., description="Spanish verse text")
    english: str = Field(..., description="English verse text")


class AlignmentLinkModel(BaseModel):
    """One aligned Spanish word."""

    spanish_index: int
    spanish_word: str
    english_indices: List[int]
    english_words: List[str]
    matched_candidates: List[str]


class AlignResponse(BaseModel):
    """Alignment of a verse pair."""

    spanish_words: List[str]
    english_words: List[str]
    alignment: Dict[int, List[int]] = Field(
        ..., description="Spanish word index -> English word indices"
    )
    links: List[AlignmentLinkModel]
