from collections import Counter
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from app.core.survey_fields import COMMENT_FIELDS, COMMENT_FIELDS_BY_KEY, CommentField
from app.schemas.common import Page
from app.schemas.sentiment import (
    CommentAnalysis,
    CommentFieldInfo,
    EmployeeSentiment,
    FieldSentimentSummary,
    ScoreCorrelation,
    SentimentDistribution,
    SentimentExamples,
    SentimentSummary,
    WordCount,
    WordFrequency,
)
from app.services.base import BaseService
from app.services.repository import SurveyRepository
from app.services.sentiment_analyzer import SentimentAnalyzer, default_analyzer, normalize_token
from app.services.statistics import pearson_correlation

SUMMARY_EXAMPLES = 3
FIELD_EXAMPLES = 5
TOP_COMMENTS = 10
TOP_WORDS = 20
MIN_CORRELATION_POINTS = 5


def _distribution(analyses: Iterable[CommentAnalysis]) -> SentimentDistribution:
    distribution = SentimentDistribution()
    for a in analyses:
        setattr(distribution, a.sentiment.label, getattr(distribution, a.sentiment.label) + 1)
    return distribution


def _average(analyses: List[CommentAnalysis]) -> float:
    if not analyses:
        return 0.0
    return round(sum(a.sentiment.score for a in analyses) / len(analyses), 3)


def _by_score(analyses: List[CommentAnalysis]) -> List[CommentAnalysis]:
    # Stable: equal scores keep collection order
    return sorted(analyses, key=lambda a: a.sentiment.score, reverse=True)


def _most_negative(ranked: List[CommentAnalysis], limit: int) -> List[CommentAnalysis]:
    negatives = [a for a in ranked if a.sentiment.label == "negative"]
    return list(reversed(negatives[-limit:])) if limit else []


def _field_summary(field: CommentField, analyses: List[CommentAnalysis], examples: int) -> FieldSentimentSummary:
    ranked = _by_score(analyses)
    return FieldSentimentSummary(
        field=field.key,
        label=field.label,
        total_comments=len(analyses),
        average_sentiment=_average(analyses),
        distribution=_distribution(analyses),
        examples=SentimentExamples(
            positive=[a for a in ranked if a.sentiment.label == "positive"][:examples],
            neutral=[a for a in analyses if a.sentiment.label == "neutral"][:examples],
            negative=_most_negative(ranked, examples),
        ),
    )


class SentimentService(BaseService):
    """Sentiment analysis over stored survey comments."""

    def __init__(
        self,
        db: Session,
        repository: SurveyRepository = None,
        analyzer: SentimentAnalyzer = default_analyzer,
    ):
        super().__init__(db, repository)
        self.analyzer = analyzer

    def analyze_text(self, text: Optional[str]):
        return self.analyzer.analyze(text)

    def analyze_surveys(self, surveys: Iterable) -> List[CommentAnalysis]:
        analyses: List[CommentAnalysis] = []
        for survey in surveys:
            for field in COMMENT_FIELDS:
                text = field.text_of(survey)
                if text and text.strip():
                    analyses.append(CommentAnalysis(
                        survey_id=survey.id,
                        employee_id=survey.employee_id,
                        field=field.key,
                        field_label=field.label,
                        text=text,
                        sentiment=self.analyzer.analyze(text),
                        related_score=field.score_of(survey),
                    ))
        return analyses

    def analyze_all_comments(self, employee_id: Optional[int] = None) -> List[CommentAnalysis]:
        return self.analyze_surveys(self.repository.list_surveys(employee_id=employee_id))

    def get_summary(self) -> SentimentSummary:
        analyses = self.analyze_all_comments()
        self.log_info(f"Summarizing sentiment over {len(analyses)} comments")

        lexicon = self.analyzer.lexicon
        positive_words: Counter = Counter()
        negative_words: Counter = Counter()
        for analysis in analyses:
            for token in analysis.sentiment.tokens:
                normalized = normalize_token(token)
                if lexicon.is_positive(normalized, token):
                    positive_words[token] += 1
                if lexicon.is_negative(normalized, token):
                    negative_words[token] += 1

        by_field = []
        for field in COMMENT_FIELDS:
            field_analyses = [a for a in analyses if a.field == field.key]
            if field_analyses:
                by_field.append(_field_summary(field, field_analyses, SUMMARY_EXAMPLES))

        ranked = _by_score(analyses)
        return SentimentSummary(
            total_comments=len(analyses),
            average_sentiment=_average(analyses),
            distribution=_distribution(analyses),
            by_field=by_field,
            top_positive=[a for a in ranked if a.sentiment.label == "positive"][:TOP_COMMENTS],
            top_negative=_most_negative(ranked, TOP_COMMENTS),
            word_frequency=WordFrequency(
                positive=[WordCount(word=w, count=c) for w, c in positive_words.most_common(TOP_WORDS)],
                negative=[WordCount(word=w, count=c) for w, c in negative_words.most_common(TOP_WORDS)],
            ),
        )

    def get_field_sentiment(self, field_key: str) -> Optional[FieldSentimentSummary]:
        field = COMMENT_FIELDS_BY_KEY.get(field_key)
        if field is None:
            return None
        analyses = [a for a in self.analyze_all_comments() if a.field == field_key]
        return _field_summary(field, analyses, FIELD_EXAMPLES)

    def get_employee_sentiment(self, employee_id: int) -> EmployeeSentiment:
        comments = self.analyze_all_comments(employee_id=employee_id)
        return EmployeeSentiment(
            employee_id=employee_id,
            comments=comments,
            average_sentiment=_average(comments),
            distribution=_distribution(comments),
        )

    def get_score_correlation(self) -> List[ScoreCorrelation]:
        analyses = self.analyze_all_comments()
        results: List[ScoreCorrelation] = []
        for field in COMMENT_FIELDS:
            paired = [a for a in analyses if a.field == field.key and a.related_score is not None]
            if len(paired) < MIN_CORRELATION_POINTS:
                continue
            correlation = pearson_correlation(
                [a.sentiment.score for a in paired],
                [a.related_score for a in paired],
            )
            results.append(ScoreCorrelation(
                field=field.key,
                label=field.label,
                correlation=round(correlation, 3),
                data_points=len(paired),
            ))
        return results

    def list_comments(
        self,
        field: Optional[str] = None,
        label: Optional[str] = None,
        page: int = 1,
        limit: int = 20,
    ) -> Page[CommentAnalysis]:
        comments = self.analyze_all_comments()
        if field:
            comments = [c for c in comments if c.field == field]
        if label:
            comments = [c for c in comments if c.sentiment.label == label]
        return Page[CommentAnalysis].slice(comments, page, limit)

    @staticmethod
    def comment_fields() -> List[CommentFieldInfo]:
        return [CommentFieldInfo(**f.to_dict()) for f in COMMENT_FIELDS]
