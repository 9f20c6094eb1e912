"""Reina-Valera book catalogue and Spanish reference parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass

from palabra.lexicon.normalize import normalize_text


class UnknownBookError(ValueError):
    """Raised when a Spanish book name is not in the catalogue."""

    def __init__(self, book: str):
        self.book = book
        super().__init__(f"Unknown book: {book}")


@dataclass(frozen=True)
class Book:
    """A book of the Bible with its Spanish and English names."""

    spanish: str
    english: str
    chapters: int


# Canonical order, Reina-Valera names
BOOKS: tuple[Book, ...] = (
    # Old Testament
    Book("Génesis", "Genesis", 50),
    Book("Éxodo", "Exodus", 40),
    Book("Levítico", "Leviticus", 27),
    Book("Números", "Numbers", 36),
    Book("Deuteronomio", "Deuteronomy", 34),
    Book("Josué", "Joshua", 24),
    Book("Jueces", "Judges", 21),
    Book("Rut", "Ruth", 4),
    Book("1 Samuel", "1 Samuel", 31),
    Book("2 Samuel", "2 Samuel", 24),
    Book("1 Reyes", "1 Kings", 22),
    Book("2 Reyes", "2 Kings", 25),
    Book("1 Crónicas", "1 Chronicles", 29),
    Book("2 Crónicas", "2 Chronicles", 36),
    Book("Esdras", "Ezra", 10),
    Book("Nehemías", "Nehemiah", 13),
    Book("Ester", "Esther", 10),
    Book("Job", "Job", 42),
    Book("Salmos", "Psalms", 150),
    Book("Proverbios", "Proverbs", 31),
    Book("Eclesiastés", "Ecclesiastes", 12),
    Book("Cantares", "Song of Solomon", 8),
    Book("Isaías", "Isaiah", 66),
    Book("Jeremías", "Jeremiah", 52),
    Book("Lamentaciones", "Lamentations", 5),
    Book("Ezequiel", "Ezekiel", 48),
    Book("Daniel", "Daniel", 12),
    Book("Oseas", "Hosea", 14),
    Book("Joel", "Joel", 3),
    Book("Amós", "Amos", 9),
    Book("Abdías", "Obadiah", 1),
    Book("Jonás", "Jonah", 4),
    Book("Miqueas", "Micah", 7),
    Book("Nahúm", "Nahum", 3),
    Book("Habacuc", "Habakkuk", 3),
    Book("Sofonías", "Zephaniah", 3),
    Book("Hageo", "Haggai", 2),
    Book("Zacarías", "Zechariah", 14),
    Book("Malaquías", "Malachi", 4),
    # New Testament
    Book("Mateo", "Matthew", 28),
    Book("Marcos", "Mark", 16),
    Book("Lucas", "Luke", 24),
    Book("Juan", "John", 21),
    Book("Hechos", "Acts", 28),
    Book("Romanos", "Romans", 16),
    Book("1 Corintios", "1 Corinthians", 16),
    Book("2 Corintios", "2 Corinthians", 13),
    Book("Gálatas", "Galatians", 6),
    Book("Efesios", "Ephesians", 6),
    Book("Filipenses", "Philippians", 4),
    Book("Colosenses", "Colossians", 4),
    Book("1 Tesalonicenses", "1 Thessalonians", 5),
    Book("2 Tesalonicenses", "2 Thessalonians", 3),
    Book("1 Timoteo", "1 Timothy", 6),
    Book("2 Timoteo", "2 Timothy", 4),
    Book("Tito", "Titus", 3),
    Book("Filemón", "Philemon", 1),
    Book("Hebreos", "Hebrews", 13),
    Book("Santiago", "James", 5),
    Book("1 Pedro", "1 Peter", 5),
    Book("2 Pedro", "2 Peter", 3),
    Book("1 Juan", "1 John", 5),
    Book("2 Juan", "2 John", 1),
    Book("3 Juan", "3 John", 1),
    Book("Judas", "Jude", 1),
    Book("Apocalipsis", "Revelation", 22),
)

_BOOKS_BY_KEY = {normalize_text(b.spanish): b for b in BOOKS}


def find_book(name: str) -> Book:
    """Look up a book by Spanish name, ignoring case and accents.

    Raises:
        UnknownBookError: If the name is not a Reina-Valera book
    """
    key = " ".join(normalize_text(name).split())
    book = _BOOKS_BY_KEY.get(key)
    if book is None:
        raise UnknownBookError(name)
    return book


def english_book_name(spanish_name: str) -> str:
    """English (KJV) name for a Spanish book, e.g. "Éxodo" -> "Exodus"."""
    return find_book(spanish_name).english


def chapters_in_book(spanish_name: str) -> int:
    return find_book(spanish_name).chapters


@dataclass
class VerseRef:
    """Parsed Spanish scripture reference."""

    book: str
    chapter: int
    verse: int

    def __str__(self) -> str:
        return f"{self.book} {self.chapter}:{self.verse}"


def parse_reference(ref_string: str) -> VerseRef:
    """
    Parse a Spanish scripture reference.

    Supported formats:
    - "Juan 3:16"
    - "génesis 1:1"
    - "1 Juan 4:8"

    Args:
        ref_string: Reference string to parse

    Returns:
        VerseRef with the canonical Spanish book name

    Raises:
        ValueError: If the reference cannot be parsed or the chapter is
            out of range (UnknownBookError for unknown books)
    """
    pattern = r"^(\d?\s*[^\d:]+?)\s*(\d+):(\d+)$"
    match = re.match(pattern, ref_string.strip())

    if not match:
        raise ValueError(f"Cannot parse reference: {ref_string}")

    book_raw, chapter_str, verse_str = match.groups()
    book = find_book(book_raw)
    chapter = int(chapter_str)
    verse = int(verse_str)

    if not 1 <= chapter <= book.chapters:
        raise ValueError(
            f"{book.spanish} has {book.chapters} chapters, got {chapter}"
        )
    if verse < 1:
        raise ValueError(f"Verse must be positive, got {verse}")

    return VerseRef(book=book.spanish, chapter=chapter, verse=verse)
