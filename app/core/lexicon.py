"""
Lexicon Store.

An immutable bundle of the word tables the sentiment analyzer reads. Built
once at import time and shared by reference; mappings are wrapped in
read-only proxies so no caller can mutate the process-wide instance.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from app.core import lexicon_data


@dataclass(frozen=True)
class Lexicon:
    positive: Mapping[str, int]
    negative: Mapping[str, int]
    negations: frozenset
    intensifiers: Mapping[str, float]
    diminishers: Mapping[str, float]
    stop_words: frozenset

    # Largest absolute word weight; the analyzer normalizes by it.
    max_word_score: int = 3

    @classmethod
    def build(
        cls,
        positive: Mapping[str, int],
        negative: Mapping[str, int],
        negations: Iterable[str],
        intensifiers: Mapping[str, float],
        diminishers: Mapping[str, float],
        stop_words: Iterable[str] = (),
    ) -> "Lexicon":
        # Negative weights are stored signed regardless of how they were given
        signed_negative = {word: -abs(score) for word, score in negative.items()}
        return cls(
            positive=MappingProxyType(dict(positive)),
            negative=MappingProxyType(signed_negative),
            negations=frozenset(negations),
            intensifiers=MappingProxyType(dict(intensifiers)),
            diminishers=MappingProxyType(dict(diminishers)),
            stop_words=frozenset(stop_words),
        )

    def lookup(self, normalized: str, original: Optional[str] = None) -> int:
        """Signed lexicon weight for a token, 0 when the word is unknown."""
        original = original if original is not None else normalized
        return (
            self.positive.get(normalized)
            or self.positive.get(original)
            or self.negative.get(normalized)
            or self.negative.get(original)
            or 0
        )

    def is_positive(self, normalized: str, original: str) -> bool:
        return normalized in self.positive or original in self.positive

    def is_negative(self, normalized: str, original: str) -> bool:
        return normalized in self.negative or original in self.negative


PORTUGUESE_LEXICON = Lexicon.build(
    positive=lexicon_data.POSITIVE_WORDS,
    negative=lexicon_data.NEGATIVE_WORDS,
    negations=lexicon_data.NEGATION_WORDS,
    intensifiers=lexicon_data.INTENSIFIERS,
    diminishers=lexicon_data.DIMINISHERS,
    stop_words=lexicon_data.STOP_WORDS,
)
