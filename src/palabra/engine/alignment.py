"""Word alignment between a Spanish verse and its English counterpart.

Deterministic heuristic used for hover highlighting:

    expected(i) = i / len(spanish_words) * len(english_words)

For each Spanish word, every dictionary candidate is looked up in an index
of the English words; among a candidate's occurrences the one nearest
expected(i) is kept, and across candidates the nearest overall wins.
Candidates landing within ``tie_epsilon`` of the best distance are all
kept, so the result may highlight several English words.

No network access: words missing from the dictionary are left unaligned.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from palabra.config import Settings
from palabra.lexicon.dictionary import BilingualDictionary, get_default_dictionary
from palabra.lexicon.normalize import normalize_word, tokenize

AlignmentMap = dict[int, set[int]]


@dataclass
class AlignmentLink:
    """One Spanish word and the English words it was aligned to."""

    spanish_index: int
    spanish_word: str
    english_indices: list[int]
    english_words: list[str]
    matched_candidates: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "spanish_index": self.spanish_index,
            "spanish_word": self.spanish_word,
            "english_indices": self.english_indices,
            "english_words": self.english_words,
            "matched_candidates": self.matched_candidates,
        }


def build_position_index(words: list[str]) -> dict[str, list[int]]:
    """Map each normalized word to every position it occurs at."""
    index: dict[str, list[int]] = {}
    for position, word in enumerate(words):
        key = normalize_word(word)
        if key:
            index.setdefault(key, []).append(position)
    return index


def _nearest(positions: list[int], expected: float) -> int:
    # min() keeps the first position on exact ties
    return min(positions, key=lambda p: abs(p - expected))


class AlignmentEngine:
    """Computes Spanish -> English word alignments."""

    def __init__(
        self,
        dictionary: BilingualDictionary | None = None,
        tie_epsilon: float | None = None,
    ):
        self.dictionary = (
            dictionary if dictionary is not None else get_default_dictionary()
        )
        self.tie_epsilon = (
            Settings().alignment_tie_epsilon if tie_epsilon is None else tie_epsilon
        )

    def align(self, spanish_text: str, english_text: str) -> AlignmentMap:
        """Align every Spanish word the dictionary knows.

        Args:
            spanish_text: Spanish sentence
            english_text: English sentence for the same reference

        Returns:
            Spanish index -> set of English indices. Words with no
            confident match have no entry. Blank input yields {}.
        """
        return {
            link.spanish_index: set(link.english_indices)
            for link in self.explain(spanish_text, english_text)
        }

    def explain(self, spanish_text: str, english_text: str) -> list[AlignmentLink]:
        """Same alignment as align(), with the words and senses behind it."""
        if not isinstance(spanish_text, str) or not isinstance(english_text, str):
            return []
        spanish_words = tokenize(spanish_text)
        english_words = tokenize(english_text)
        if not spanish_words or not english_words:
            return []

        english_index = build_position_index(english_words)
        links = []

        for i, word in enumerate(spanish_words):
            expected = (i / len(spanish_words)) * len(english_words)
            positions, matched = self._align_word(word, expected, english_index)
            if not positions:
                continue
            ordered = sorted(positions)
            links.append(
                AlignmentLink(
                    spanish_index=i,
                    spanish_word=word,
                    english_indices=ordered,
                    english_words=[english_words[j] for j in ordered],
                    matched_candidates=matched,
                )
            )

        return links

    def _align_word(
        self, word: str, expected: float, english_index: dict[str, list[int]]
    ) -> tuple[set[int], list[str]]:
        candidates = self.dictionary.candidates(word)
        if not candidates:
            return set(), []

        best_distance = float("inf")
        positions: set[int] = set()
        matched: list[str] = []

        for candidate in candidates:
            occurrences = english_index.get(normalize_word(candidate))
            if not occurrences:
                continue

            position = _nearest(occurrences, expected)
            distance = abs(position - expected)

            if distance < best_distance - self.tie_epsilon:
                best_distance = distance
                positions = {position}
                matched = [candidate]
            elif abs(distance - best_distance) <= self.tie_epsilon:
                best_distance = min(best_distance, distance)
                positions.add(position)
                if candidate not in matched:
                    matched.append(candidate)

        return positions, matched


def compute_alignment(
    spanish_text: str,
    english_text: str,
    dictionary: BilingualDictionary | None = None,
) -> AlignmentMap:
    """Align a Spanish sentence with its English counterpart.

    Example:
        >>> alignment = compute_alignment(
        ...     "En el principio creó Dios los cielos y la tierra",
        ...     "In the beginning God created the heaven and the earth",
        ... )
        >>> alignment[4]
        {3}
    """
    return AlignmentEngine(dictionary).align(spanish_text, english_text)
