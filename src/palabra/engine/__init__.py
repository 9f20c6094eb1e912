"""Translation engine: word resolution and verse alignment."""

from palabra.engine.alignment import (
    AlignmentEngine,
    AlignmentLink,
    AlignmentMap,
    compute_alignment,
)
from palabra.engine.cache import TTLCache
from palabra.engine.resolver import WordFallback, WordResolver, choose_candidate

__all__ = [
    "AlignmentEngine",
    "AlignmentLink",
    "AlignmentMap",
    "TTLCache",
    "WordFallback",
    "WordResolver",
    "choose_candidate",
    "compute_alignment",
]
