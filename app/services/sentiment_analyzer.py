"""
Lexicon-based sentiment scoring for Portuguese free text.

Pipeline: preprocess -> accent-normalize -> left-to-right scan with negation
and intensity state -> normalize by the maximum word weight.

The analyzer holds no per-call state; one instance is shared by every
request.
"""
import re
import unicodedata
from typing import List, Optional

from app.core.lexicon import Lexicon, PORTUGUESE_LEXICON
from app.schemas.sentiment import SentimentResult

URL_PATTERN = re.compile(r"https?://\S+")
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
# \w is Unicode-aware, so accented letters survive
NON_WORD_PATTERN = re.compile(r"[^\w\s-]")
WHITESPACE_PATTERN = re.compile(r"\s+")

NEGATION_WINDOW = 3
MAX_RETURNED_TOKENS = 50
LABEL_THRESHOLD = 0.1
MIN_CONFIDENCE_DENOMINATOR = 5


def normalize_token(token: str) -> str:
    """Strip diacritics and lowercase (lexicon lookup form)."""
    decomposed = unicodedata.normalize("NFD", token)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).lower()


class SentimentAnalyzer:
    def __init__(self, lexicon: Lexicon = PORTUGUESE_LEXICON):
        self.lexicon = lexicon

    def preprocess(self, text: Optional[str], remove_stop_words: bool = False) -> List[str]:
        if not text:
            return []

        # Combining accents would otherwise be stripped as punctuation and split words
        processed = unicodedata.normalize("NFC", text).lower()
        processed = URL_PATTERN.sub("", processed)
        processed = EMAIL_PATTERN.sub("", processed)
        processed = NON_WORD_PATTERN.sub(" ", processed)
        processed = WHITESPACE_PATTERN.sub(" ", processed).strip()

        tokens = [t for t in processed.split(" ") if len(t) > 1]

        if remove_stop_words:
            return [t for t in tokens if t not in self.lexicon.stop_words]
        return tokens

    def analyze(self, text: Optional[str]) -> SentimentResult:
        if not text or not text.strip():
            return SentimentResult()

        tokens = self.preprocess(text)
        normalized = [normalize_token(t) for t in tokens]
        lexicon = self.lexicon

        total_score = 0.0
        positive_count = 0
        negative_count = 0
        scored_words = 0
        negated = False
        multiplier = 1.0

        for i, token in enumerate(normalized):
            original = tokens[i]

            if token in lexicon.negations:
                negated = True
                continue

            if token in lexicon.intensifiers:
                multiplier = lexicon.intensifiers[token]
                continue

            if token in lexicon.diminishers:
                multiplier = lexicon.diminishers[token]
                continue

            score = lexicon.lookup(token, original)

            if score != 0:
                if negated:
                    score = -score
                    negated = False

                score *= multiplier
                multiplier = 1.0

                total_score += score
                scored_words += 1
                if score > 0:
                    positive_count += 1
                elif score < 0:
                    negative_count += 1
            elif i >= NEGATION_WINDOW and normalized[i - NEGATION_WINDOW] in lexicon.negations:
                # Negation expires once its window passes without a sentiment word.
                # Lookback is bounded: nothing before the first token can expire a negation.
                negated = False

        max_possible = scored_words * lexicon.max_word_score
        normalized_score = max(-1.0, min(1.0, total_score / max_possible)) if max_possible > 0 else 0.0

        confidence = (
            min(1.0, scored_words / max(MIN_CONFIDENCE_DENOMINATOR, len(tokens) / 3))
            if tokens else 0.0
        )

        if normalized_score > LABEL_THRESHOLD:
            label = "positive"
        elif normalized_score < -LABEL_THRESHOLD:
            label = "negative"
        else:
            label = "neutral"

        return SentimentResult(
            score=round(normalized_score, 3),
            label=label,
            confidence=round(confidence, 3),
            positive_count=positive_count,
            negative_count=negative_count,
            tokens=tokens[:MAX_RETURNED_TOKENS],
        )


# Process-wide analyzer over the immutable Portuguese lexicon
default_analyzer = SentimentAnalyzer()
