"""
Display labels for enum values.
"""

from __future__ import annotations

from core.schemas import Language, WordStatus, WordType


LANGUAGE_LABELS = {
    Language.JAPANESE: "🇯🇵 Japanese",
    Language.CHINESE: "🇨🇳 Chinese",
    Language.KOREAN: "🇰🇷 Korean",
    Language.OTHER: "🌐 Other",
}

STATUS_LABELS = {
    WordStatus.UNKNOWN: "❌ Don't know",
    WordStatus.PARTIAL: "⚠️ Somewhat",
    WordStatus.KNOWN: "✅ Know it",
    WordStatus.EXCLUDED: "🚫 Excluded",
}

WORD_TYPE_LABELS = {
    WordType.NOUN: "Noun",
    WordType.VERB: "Verb",
    WordType.ADJECTIVE: "Adjective",
    WordType.ADVERB: "Adverb",
    WordType.PARTICLE: "Particle",
    WordType.EXPRESSION: "Expression",
    WordType.OTHER: "Other",
}
