"""Translation pipeline: verse/word orchestration with provenance."""

from palabra.pipeline.orchestrator import (
    TranslationService,
    TranslationSource,
    VerseTranslation,
)

__all__ = [
    "TranslationService",
    "TranslationSource",
    "VerseTranslation",
]
