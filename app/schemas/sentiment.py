from pydantic import BaseModel, Field
from typing import List, Literal, Optional

SentimentLabel = Literal["positive", "neutral", "negative"]


class SentimentResult(BaseModel):
    score: float = Field(default=0.0, ge=-1.0, le=1.0)
    label: SentimentLabel = "neutral"
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    positive_count: int = 0
    negative_count: int = 0
    tokens: List[str] = Field(default_factory=list)


class SentimentDistribution(BaseModel):
    positive: int = 0
    neutral: int = 0
    negative: int = 0


class CommentAnalysis(BaseModel):
    survey_id: int
    employee_id: Optional[int] = None
    field: str
    field_label: str
    text: str
    sentiment: SentimentResult
    related_score: Optional[int] = None


class SentimentExamples(BaseModel):
    positive: List[CommentAnalysis] = Field(default_factory=list)
    neutral: List[CommentAnalysis] = Field(default_factory=list)
    negative: List[CommentAnalysis] = Field(default_factory=list)


class FieldSentimentSummary(BaseModel):
    field: str
    label: str
    total_comments: int
    average_sentiment: float
    distribution: SentimentDistribution
    examples: SentimentExamples


class WordCount(BaseModel):
    word: str
    count: int


class WordFrequency(BaseModel):
    positive: List[WordCount] = Field(default_factory=list)
    negative: List[WordCount] = Field(default_factory=list)


class SentimentSummary(BaseModel):
    total_comments: int
    average_sentiment: float
    distribution: SentimentDistribution
    by_field: List[FieldSentimentSummary]
    top_positive: List[CommentAnalysis]
    top_negative: List[CommentAnalysis]
    word_frequency: WordFrequency


class EmployeeSentiment(BaseModel):
    employee_id: int
    comments: List[CommentAnalysis]
    average_sentiment: float
    distribution: SentimentDistribution


class ScoreCorrelation(BaseModel):
    field: str
    label: str
    correlation: float
    data_points: int


class CommentFieldInfo(BaseModel):
    key: str
    label: str
    related_score: str


class AnalyzeTextRequest(BaseModel):
    text: Optional[str] = None


class AnalyzeTextResponse(BaseModel):
    text: Optional[str] = None
    sentiment: SentimentResult
