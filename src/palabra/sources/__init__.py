"""Upstream collaborators: book catalogue, English verses, word fallback."""

from palabra.sources.bible_api import EnglishVerse, EnglishVerseClient, VerseFetchError
from palabra.sources.books import (
    BOOKS,
    Book,
    UnknownBookError,
    VerseRef,
    chapters_in_book,
    english_book_name,
    find_book,
    parse_reference,
)
from palabra.sources.mymemory import MyMemoryClient, TranslationFetchError

__all__ = [
    "BOOKS",
    "Book",
    "EnglishVerse",
    "EnglishVerseClient",
    "MyMemoryClient",
    "TranslationFetchError",
    "UnknownBookError",
    "VerseFetchError",
    "VerseRef",
    "chapters_in_book",
    "english_book_name",
    "find_book",
    "parse_reference",
]
